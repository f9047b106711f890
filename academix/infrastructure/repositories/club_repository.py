"""
SQLAlchemy Implementation of Club Repository.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from academix.domain.models.club import Club, ClubEvent, ClubMember
from academix.domain.repositories.club_repository import ClubRepository
from academix.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyClubRepository(SQLAlchemyRepository[Club], ClubRepository):
    """Club repository implementation using SQLAlchemy."""

    def list_newest_first(self) -> List[Club]:
        return self.db.query(Club).order_by(Club.created_at.desc(), Club.id.desc()).all()

    def name_taken(self, name: str, exclude_id: Optional[int] = None) -> bool:
        query = self.db.query(Club.id).filter(Club.name == name)
        if exclude_id is not None:
            query = query.filter(Club.id != exclude_id)
        return query.first() is not None

    def is_member(self, club_id: int, user_id: int) -> bool:
        return (
            self.db.query(ClubMember.id)
            .filter(ClubMember.club_id == club_id, ClubMember.user_id == user_id)
            .first()
            is not None
        )

    def add_member(self, club_id: int, user_id: int) -> bool:
        self.db.add(ClubMember(club_id=club_id, user_id=user_id))
        try:
            self.db.commit()
        except IntegrityError:
            # uq_club_member: a concurrent request enrolled the same user
            self.db.rollback()
            return False
        return True

    def remove_member(self, club_id: int, user_id: int) -> int:
        removed = (
            self.db.query(ClubMember)
            .filter(ClubMember.club_id == club_id, ClubMember.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return removed

    def add_event(
        self,
        club_id: int,
        title: str,
        date: datetime,
        description: str = "",
        location: str = "",
    ) -> ClubEvent:
        event = ClubEvent(
            club_id=club_id,
            title=title,
            date=date,
            description=description,
            location=location,
        )
        self.db.add(event)
        self.db.commit()
        self.db.refresh(event)
        return event

    def event_ids(self, club_id: int) -> List[int]:
        rows = (
            self.db.query(ClubEvent.id)
            .filter(ClubEvent.club_id == club_id)
            .order_by(ClubEvent.id)
            .all()
        )
        return [r[0] for r in rows]

    def delete_event(self, club_id: int, event_id: int) -> bool:
        event = (
            self.db.query(ClubEvent)
            .filter(ClubEvent.id == event_id, ClubEvent.club_id == club_id)
            .first()
        )
        if event is None:
            return False
        self.db.delete(event)
        self.db.commit()
        return True
