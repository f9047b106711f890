"""Auth API routes — login, register, me."""

from fastapi import APIRouter, Depends, status

from academix.application.services.auth_service import (
    authenticate_user,
    issue_token,
    register_user,
)
from academix.domain.models.user import User
from academix.domain.repositories.user_repository import UserRepository
from academix.domain.schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserRead
from academix.interfaces.api.deps import get_current_user
from academix.interfaces.deps import get_user_repository

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def _auth_response(user: User) -> AuthResponse:
    profile = UserRead.model_validate(user)
    return AuthResponse(**profile.model_dump(), token=issue_token(user))


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(body: RegisterRequest, repo: UserRepository = Depends(get_user_repository)):
    user = register_user(repo, body)
    return _auth_response(user)


@router.post("/login", response_model=AuthResponse)
def login(body: LoginRequest, repo: UserRepository = Depends(get_user_repository)):
    user = authenticate_user(repo, body.email, body.password)
    return _auth_response(user)


@router.get("/me", response_model=UserRead)
def get_me(user: User = Depends(get_current_user)):
    return UserRead.model_validate(user)
