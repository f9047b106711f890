"""
API Dependencies — repository providers.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from academix.infrastructure.database import get_db
from academix.domain.models.club import Club
from academix.domain.models.notification import Notification
from academix.domain.models.user import User
from academix.domain.repositories.club_repository import ClubRepository
from academix.domain.repositories.notification_repository import NotificationRepository
from academix.domain.repositories.user_repository import UserRepository
from academix.infrastructure.repositories.club_repository import SQLAlchemyClubRepository
from academix.infrastructure.repositories.notification_repository import (
    SQLAlchemyNotificationRepository,
)
from academix.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """Get user repository instance."""
    return SQLAlchemyUserRepository(db, User)


def get_club_repository(db: Session = Depends(get_db)) -> ClubRepository:
    """Get club repository instance."""
    return SQLAlchemyClubRepository(db, Club)


def get_notification_repository(db: Session = Depends(get_db)) -> NotificationRepository:
    """Get notification repository instance."""
    return SQLAlchemyNotificationRepository(db, Notification)
