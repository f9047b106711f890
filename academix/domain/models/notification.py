"""In-app notification — one row per recipient."""

import enum

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.sql import func

from academix.infrastructure.database import Base


class NotificationType(str, enum.Enum):
    NEW_CLUB = "new_club"
    NEW_EVENT = "new_event"


class Notification(Base):
    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    type = Column(String(20), nullable=False)  # new_club, new_event
    title = Column(String(300), nullable=False)
    message = Column(Text, nullable=False, default="")
    read = Column(Boolean, nullable=False, default=False)
    # Plain id: notifications outlive the club they point at
    club_id = Column(Integer, nullable=True, index=True)
    event_title = Column(String(300), nullable=True)
    event_date = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Notification {self.type} -> user {self.user_id}>"
