"""
Notification Repository Interface.
"""

from typing import Any, Dict, List, Optional

from academix.domain.repositories.base import BaseRepository
from academix.domain.models.notification import Notification


class NotificationRepository(BaseRepository[Notification]):
    """Interface for Notification-specific operations."""

    def bulk_create(self, rows: List[Dict[str, Any]]) -> int:
        """Insert many notifications in one batch. Returns the row count."""
        ...

    def list_for_user(self, user_id: int, limit: int = 50) -> List[Notification]:
        """Newest notifications addressed to a user."""
        ...

    def mark_read(self, notification_id: int, user_id: int) -> Optional[Notification]:
        """Mark one of the user's notifications as read."""
        ...

    def mark_all_read(self, user_id: int) -> int:
        """Mark every unread notification of the user as read."""
        ...
