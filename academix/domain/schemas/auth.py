"""Pydantic schemas for User and Auth."""

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, field_validator

from academix.domain.models.role import RoleName
from academix.domain.models.user import YEAR_CHOICES
from academix.domain.schemas.common import CamelModel


def _blank_to_none(value):
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


class RegisterRequest(CamelModel):
    name: str
    email: EmailStr
    password: str
    role: RoleName
    student_id: Optional[str] = None
    department: Optional[str] = None
    year: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        return v

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("password")
    @classmethod
    def password_length(cls, v: str) -> str:
        if len(v) < 6:
            raise ValueError("Password must be at least 6 characters")
        return v

    @field_validator("role", mode="before")
    @classmethod
    def valid_role(cls, v):
        try:
            return RoleName(v)
        except ValueError:
            raise ValueError("Invalid role")

    @field_validator("student_id", "department", mode="before")
    @classmethod
    def strip_optional(cls, v):
        return _blank_to_none(v)

    @field_validator("year", mode="before")
    @classmethod
    def valid_year(cls, v):
        v = _blank_to_none(v)
        if v is not None and v not in YEAR_CHOICES:
            raise ValueError("Invalid year")
        return v


class LoginRequest(CamelModel):
    email: EmailStr
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("password")
    @classmethod
    def password_required(cls, v: str) -> str:
        if not v:
            raise ValueError("Password is required")
        return v


class UserRead(CamelModel):
    id: int
    name: str
    email: str
    role: Optional[str] = None
    student_id: Optional[str] = None
    coordinator_id: Optional[str] = None
    department: Optional[str] = None
    year: Optional[str] = None
    last_login: Optional[datetime] = None

    @field_validator("role", mode="before")
    @classmethod
    def role_to_name(cls, v):
        # ORM users carry a Role row
        return getattr(v, "name", v)


class AuthResponse(UserRead):
    token: str
