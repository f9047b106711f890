"""
Club Repository Interface.
Membership and event changes are single-row writes, never whole-aggregate replaces.
"""

from datetime import datetime
from typing import List, Optional

from academix.domain.repositories.base import BaseRepository
from academix.domain.models.club import Club, ClubEvent


class ClubRepository(BaseRepository[Club]):
    """Interface for Club-specific operations."""

    def list_newest_first(self) -> List[Club]:
        """All clubs, most recently created first."""
        ...

    def name_taken(self, name: str, exclude_id: Optional[int] = None) -> bool:
        """Check whether another club already uses this exact name."""
        ...

    def is_member(self, club_id: int, user_id: int) -> bool:
        """Check whether a user belongs to a club."""
        ...

    def add_member(self, club_id: int, user_id: int) -> bool:
        """Insert a membership. Returns False if it already existed."""
        ...

    def remove_member(self, club_id: int, user_id: int) -> int:
        """Delete a membership. Returns the number of rows removed."""
        ...

    def add_event(
        self,
        club_id: int,
        title: str,
        date: datetime,
        description: str = "",
        location: str = "",
    ) -> ClubEvent:
        """Append an event to a club."""
        ...

    def event_ids(self, club_id: int) -> List[int]:
        """Event ids of a club in list order."""
        ...

    def delete_event(self, club_id: int, event_id: int) -> bool:
        """Delete one event of a club by id. Returns False if not found."""
        ...
