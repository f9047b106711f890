"""
SQLAlchemy Implementation of Notification Repository.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import insert

from academix.domain.models.notification import Notification
from academix.domain.repositories.notification_repository import NotificationRepository
from academix.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyNotificationRepository(SQLAlchemyRepository[Notification], NotificationRepository):
    """Notification repository implementation using SQLAlchemy."""

    def bulk_create(self, rows: List[Dict[str, Any]]) -> int:
        if not rows:
            return 0
        try:
            self.db.execute(insert(Notification), rows)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return len(rows)

    def list_for_user(self, user_id: int, limit: int = 50) -> List[Notification]:
        return (
            self.db.query(Notification)
            .filter(Notification.user_id == user_id)
            .order_by(Notification.created_at.desc(), Notification.id.desc())
            .limit(limit)
            .all()
        )

    def mark_read(self, notification_id: int, user_id: int) -> Optional[Notification]:
        notification = (
            self.db.query(Notification)
            .filter(Notification.id == notification_id, Notification.user_id == user_id)
            .first()
        )
        if notification is None:
            return None
        notification.read = True
        self.db.commit()
        self.db.refresh(notification)
        return notification

    def mark_all_read(self, user_id: int) -> int:
        updated = (
            self.db.query(Notification)
            .filter(Notification.user_id == user_id, Notification.read.is_(False))
            .update({Notification.read: True}, synchronize_session=False)
        )
        self.db.commit()
        return updated
