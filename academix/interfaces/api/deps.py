"""FastAPI dependencies — JWT authentication and role-based authorization.

``get_current_user`` resolves the bearer token to an active user;
``require_roles(...)`` builds a dependency that additionally restricts the
route to a set of roles. Routes receive the resolved principal as a
parameter.
"""

from typing import Callable, Optional

import structlog
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from academix.application.services.auth_service import decode_access_token
from academix.core.exceptions import ForbiddenException, UnauthorizedException
from academix.domain.models.role import RoleName
from academix.domain.models.user import User
from academix.domain.repositories.user_repository import UserRepository
from academix.interfaces.deps import get_user_repository

logger = structlog.get_logger(__name__)
security = HTTPBearer(auto_error=False)


def authenticate(token: Optional[str], repo: UserRepository) -> User:
    """Resolve a bearer token to an active user."""
    if not token:
        raise UnauthorizedException("Not authorized, no token")

    payload = decode_access_token(token)
    subject = payload.get("sub") if payload else None
    if subject is None or not str(subject).isdigit():
        raise UnauthorizedException("Not authorized, token failed")

    user = repo.get_by_id(int(subject))
    if user is None:
        raise UnauthorizedException("User not found")

    if not user.is_active:
        raise UnauthorizedException("User account is deactivated")

    return user


def authorize(user: Optional[User], allowed: tuple[RoleName, ...]) -> User:
    """Check the principal's role against an allow-set (empty admits any role)."""
    if user is None:
        raise UnauthorizedException("Not authorized")

    role = user.role_name
    if allowed and role not in allowed:
        role_label = role.value if role else None
        logger.info("Role check failed", user_id=user.id, role=role_label)
        raise ForbiddenException(f"User role '{role_label}' is not authorized to access this route")

    return user


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    repo: UserRepository = Depends(get_user_repository),
) -> User:
    """Extract and validate the current user from JWT token."""
    token = credentials.credentials if credentials else None
    return authenticate(token, repo)


def require_roles(*roles: RoleName) -> Callable[..., User]:
    """Dependency factory restricting a route to the given roles."""
    allowed = tuple(RoleName(r) for r in roles)

    def dependency(user: User = Depends(get_current_user)) -> User:
        return authorize(user, allowed)

    return dependency


require_coordinator = require_roles(RoleName.CLUB_COORDINATOR)
require_student = require_roles(RoleName.STUDENT)
