"""Notifications API routes — the current user's inbox and read state."""

from fastapi import APIRouter, Depends

from academix.application.services.notification_service import (
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)
from academix.domain.models.user import User
from academix.domain.repositories.notification_repository import NotificationRepository
from academix.domain.schemas.club import MessageResponse
from academix.domain.schemas.notification import NotificationRead
from academix.interfaces.api.deps import get_current_user
from academix.interfaces.deps import get_notification_repository

router = APIRouter(prefix="/api/notifications", tags=["Notifications"])


@router.get("", response_model=list[NotificationRead])
def get_notifications(
    repo: NotificationRepository = Depends(get_notification_repository),
    user: User = Depends(get_current_user),
):
    return [NotificationRead.model_validate(n) for n in list_notifications(repo, user)]


@router.patch("/read-all", response_model=MessageResponse)
def read_all(
    repo: NotificationRepository = Depends(get_notification_repository),
    user: User = Depends(get_current_user),
):
    mark_all_notifications_read(repo, user)
    return MessageResponse(message="All notifications marked as read")


@router.patch("/{notification_id}/read", response_model=NotificationRead)
def read_one(
    notification_id: int,
    repo: NotificationRepository = Depends(get_notification_repository),
    user: User = Depends(get_current_user),
):
    return NotificationRead.model_validate(mark_notification_read(repo, user, notification_id))
