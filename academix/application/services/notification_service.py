"""Notification service — fan-out on club/event creation and read-state operations.

Fan-out is best-effort: it runs after the club or event write has been
committed, and a failure is logged and reported as zero notifications
written. The triggering operation never fails because of it.
"""

from datetime import datetime
from typing import Iterable, List, Optional, Union

import pytz
import structlog

from academix.config import get_settings
from academix.core.exceptions import EntityNotFoundException
from academix.domain.models.club import Club, ClubEvent, ClubMember
from academix.domain.models.notification import Notification, NotificationType
from academix.domain.models.role import RoleName
from academix.domain.models.user import User
from academix.domain.repositories.notification_repository import NotificationRepository
from academix.domain.repositories.user_repository import UserRepository

settings = get_settings()
tz = pytz.timezone(settings.TIMEZONE)
logger = structlog.get_logger(__name__)

Recipient = Union[int, User, ClubMember]


def _recipient_id(recipient: Recipient) -> int:
    """Accept raw ids, membership rows (``user_id``) or users (``id``)."""
    if isinstance(recipient, int):
        return recipient
    user_id = getattr(recipient, "user_id", None)
    if user_id is not None:
        return user_id
    return recipient.id


def format_event_date(value: datetime) -> str:
    if value.tzinfo is None:
        value = pytz.utc.localize(value)
    return value.astimezone(tz).strftime("%d/%m/%Y %H:%M")


def format_event_message(event: ClubEvent) -> str:
    message = f"{event.title} – {format_event_date(event.date)}"
    if event.location:
        message += f" at {event.location}"
    return message


def notify_new_club(
    user_repo: UserRepository,
    notification_repo: NotificationRepository,
    club: Club,
) -> int:
    """Tell every Student that a club is open for enrollment."""
    club_id = club.id
    try:
        if user_repo.get_role(RoleName.STUDENT) is None:
            return 0
        student_ids = user_repo.list_ids_by_role(RoleName.STUDENT)
        rows = [
            {
                "user_id": student_id,
                "type": NotificationType.NEW_CLUB.value,
                "title": "New club added",
                "message": f'"{club.name}" is now available. Enroll from your dashboard to join.',
                "club_id": club_id,
            }
            for student_id in student_ids
        ]
        written = notification_repo.bulk_create(rows)
    except Exception:
        logger.exception("New club notifications failed", club_id=club_id)
        return 0

    logger.info("New club notifications sent", club_id=club_id, count=written)
    return written


def notify_new_event(
    notification_repo: NotificationRepository,
    club: Club,
    event: ClubEvent,
    recipients: Optional[Iterable[Recipient]] = None,
) -> int:
    """Tell the club's current members about a new event."""
    club_id, event_id = club.id, event.id
    try:
        if recipients is None:
            recipients = club.member_ids
        rows = [
            {
                "user_id": _recipient_id(recipient),
                "type": NotificationType.NEW_EVENT.value,
                "title": f"New event in {club.name}",
                "message": format_event_message(event),
                "club_id": club_id,
                "event_title": event.title,
                "event_date": event.date,
            }
            for recipient in recipients
        ]
        written = notification_repo.bulk_create(rows)
    except Exception:
        logger.exception("Event notifications failed", club_id=club_id, event_id=event_id)
        return 0

    logger.info("Event notifications sent", club_id=club_id, event_id=event_id, count=written)
    return written


def list_notifications(repo: NotificationRepository, principal: User) -> List[Notification]:
    return repo.list_for_user(principal.id, limit=settings.NOTIFICATIONS_PAGE_LIMIT)


def mark_notification_read(
    repo: NotificationRepository, principal: User, notification_id: int
) -> Notification:
    notification = repo.mark_read(notification_id, principal.id)
    if notification is None:
        raise EntityNotFoundException("Notification not found")
    return notification


def mark_all_notifications_read(repo: NotificationRepository, principal: User) -> int:
    return repo.mark_all_read(principal.id)
