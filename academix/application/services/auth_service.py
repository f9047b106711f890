"""Auth service — JWT token management, password hashing, registration and login."""

import random
import time
from datetime import datetime, timedelta, timezone
from typing import Optional

import structlog
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError

from academix.config import get_settings
from academix.core.exceptions import ConflictException, UnauthorizedException
from academix.domain.models.role import RoleName
from academix.domain.models.user import User
from academix.domain.repositories.user_repository import UserRepository
from academix.domain.schemas.auth import RegisterRequest

settings = get_settings()
logger = structlog.get_logger(__name__)
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.JWT_EXPIRATION_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    try:
        payload = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM]
        )
        return payload
    except JWTError:
        return None


def issue_token(user: User) -> str:
    """Bearer token whose subject is the user's id."""
    return create_access_token(data={"sub": str(user.id)})


def generate_coordinator_id(repo: UserRepository) -> str:
    """CC<epoch-ms><0-999>, regenerated until no user holds it."""
    while True:
        candidate = f"CC{int(time.time() * 1000)}{random.randint(0, 999)}"
        if not repo.coordinator_id_exists(candidate):
            return candidate


def register_user(repo: UserRepository, body: RegisterRequest) -> User:
    """Create a user, creating its role on first use.

    Students keep their student id and year, coordinators get a generated
    coordinator id and keep their year, teachers get neither.
    """
    if repo.get_by_email(body.email):
        raise ConflictException("User already exists with this email")

    if body.student_id and repo.get_by_student_id(body.student_id):
        raise ConflictException("Student ID already exists")

    role = repo.get_or_create_role(body.role)

    user_data = {
        "name": body.name,
        "email": body.email,
        "password_hash": hash_password(body.password),
        "role_id": role.id,
        "department": body.department,
    }

    if body.role is RoleName.STUDENT:
        user_data["student_id"] = body.student_id
        user_data["year"] = body.year
    elif body.role is RoleName.CLUB_COORDINATOR:
        user_data["coordinator_id"] = generate_coordinator_id(repo)
        user_data["year"] = body.year

    try:
        user = repo.create(user_data)
    except IntegrityError:
        raise ConflictException("User already exists with this email")

    user = repo.touch_last_login(user)
    logger.info("User registered", user_id=user.id, role=body.role.value)
    return user


def authenticate_user(repo: UserRepository, email: str, password: str) -> User:
    """Resolve credentials to a user, or raise ``UnauthorizedException``.

    A deactivated account is reported as such before the password is checked.
    """
    user = repo.get_by_email(email)
    if not user:
        raise UnauthorizedException("Invalid credentials")

    if not user.is_active:
        raise UnauthorizedException("User account is deactivated")

    if not verify_password(password, user.password_hash):
        logger.info("Login rejected", user_id=user.id)
        raise UnauthorizedException("Invalid credentials")

    return repo.touch_last_login(user)
