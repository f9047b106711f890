"""Pydantic schemas for in-app notifications."""

from datetime import datetime
from typing import Optional

from academix.domain.schemas.common import CamelModel


class NotificationRead(CamelModel):
    id: int
    user_id: int
    type: str
    title: str
    message: str = ""
    read: bool = False
    club_id: Optional[int] = None
    event_title: Optional[str] = None
    event_date: Optional[datetime] = None
    created_at: Optional[datetime] = None
