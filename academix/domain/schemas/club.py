"""Pydantic schemas for the Club aggregate."""

from datetime import datetime, timezone
from typing import Annotated, Optional

from pydantic import BeforeValidator, field_validator

from academix.domain.schemas.common import CamelModel


def _parse_event_date(value):
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip())
        except ValueError:
            raise ValueError("Valid date is required")
    if not isinstance(value, datetime):
        raise ValueError("Valid date is required")
    # Stored as UTC; naive values are already UTC
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value


EventDate = Annotated[datetime, BeforeValidator(_parse_event_date)]


def _strip(value):
    return value.strip() if isinstance(value, str) else value


class CoordinatorSummary(CamelModel):
    id: int
    name: str
    email: str
    coordinator_id: Optional[str] = None


class MemberSummary(CamelModel):
    id: int
    name: str
    email: str
    student_id: Optional[str] = None


class EventRead(CamelModel):
    id: int
    title: str
    description: str = ""
    date: datetime
    location: str = ""
    attendees: list[MemberSummary] = []


class ClubRead(CamelModel):
    id: int
    name: str
    description: str = ""
    coordinator: CoordinatorSummary
    members: list[MemberSummary] = []
    events: list[EventRead] = []
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ClubCreate(CamelModel):
    name: str
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Club name is required")
        return v

    @field_validator("description", mode="before")
    @classmethod
    def strip_description(cls, v):
        return _strip(v)


class ClubUpdate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None

    @field_validator("name", "description", mode="before")
    @classmethod
    def strip_fields(cls, v):
        return _strip(v)


class MemberAdd(CamelModel):
    student_id: str

    @field_validator("student_id")
    @classmethod
    def student_id_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Student ID is required")
        return v


class EventCreate(CamelModel):
    title: str
    description: Optional[str] = None
    date: EventDate
    location: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Event title is required")
        return v

    @field_validator("description", "location", mode="before")
    @classmethod
    def strip_optional(cls, v):
        return _strip(v)


class MessageResponse(CamelModel):
    message: str
