"""Club aggregate — 'clubs', 'club_members', 'club_events' and 'club_event_attendees' tables."""

from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    Boolean,
    DateTime,
    ForeignKey,
    Table,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from academix.infrastructure.database import Base

club_event_attendees = Table(
    "club_event_attendees",
    Base.metadata,
    Column("event_id", Integer, ForeignKey("club_events.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
)


class Club(Base):
    __tablename__ = "clubs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), unique=True, nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    coordinator_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    coordinator = relationship("User", lazy="joined")
    memberships = relationship(
        "ClubMember",
        order_by="ClubMember.id",
        cascade="all",
        lazy="selectin",
    )
    events = relationship(
        "ClubEvent",
        order_by="ClubEvent.id",
        cascade="all",
        lazy="selectin",
    )

    @property
    def members(self):
        """Member users in enrollment order."""
        return [m.user for m in self.memberships]

    @property
    def member_ids(self) -> list[int]:
        return [m.user_id for m in self.memberships]

    def __repr__(self):
        return f"<Club {self.name}>"


class ClubMember(Base):
    __tablename__ = "club_members"
    __table_args__ = (UniqueConstraint("club_id", "user_id", name="uq_club_member"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    club_id = Column(Integer, ForeignKey("clubs.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    joined_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", lazy="joined")

    def __repr__(self):
        return f"<ClubMember club={self.club_id} user={self.user_id}>"


class ClubEvent(Base):
    __tablename__ = "club_events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    club_id = Column(Integer, ForeignKey("clubs.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(300), nullable=False)
    description = Column(Text, nullable=False, default="")
    date = Column(DateTime(timezone=True), nullable=False)
    location = Column(String(300), nullable=False, default="")
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    attendees = relationship("User", secondary=club_event_attendees, lazy="selectin")

    def __repr__(self):
        return f"<ClubEvent {self.title} @ club {self.club_id}>"
