"""Club API routes — clubs, membership, enrollment and events."""

from fastapi import APIRouter, Depends, status

from academix.application.services import club_service
from academix.domain.models.user import User
from academix.domain.repositories.club_repository import ClubRepository
from academix.domain.repositories.notification_repository import NotificationRepository
from academix.domain.repositories.user_repository import UserRepository
from academix.domain.schemas.club import (
    ClubCreate,
    ClubRead,
    ClubUpdate,
    EventCreate,
    MemberAdd,
    MessageResponse,
)
from academix.interfaces.api.deps import get_current_user, require_coordinator, require_student
from academix.interfaces.deps import (
    get_club_repository,
    get_notification_repository,
    get_user_repository,
)

router = APIRouter(prefix="/api/clubs", tags=["Clubs"])


@router.get("", response_model=list[ClubRead])
def list_clubs(
    repo: ClubRepository = Depends(get_club_repository),
    user: User = Depends(get_current_user),
):
    return [ClubRead.model_validate(c) for c in club_service.list_clubs(repo)]


@router.get("/{club_id}", response_model=ClubRead)
def get_club(
    club_id: int,
    repo: ClubRepository = Depends(get_club_repository),
    user: User = Depends(get_current_user),
):
    return ClubRead.model_validate(club_service.get_club(repo, club_id))


@router.post("", response_model=ClubRead, status_code=status.HTTP_201_CREATED)
def create_club(
    body: ClubCreate,
    repo: ClubRepository = Depends(get_club_repository),
    user_repo: UserRepository = Depends(get_user_repository),
    notification_repo: NotificationRepository = Depends(get_notification_repository),
    user: User = Depends(require_coordinator),
):
    club = club_service.create_club(repo, user_repo, notification_repo, user, body)
    return ClubRead.model_validate(club)


@router.put("/{club_id}", response_model=ClubRead)
def update_club(
    club_id: int,
    body: ClubUpdate,
    repo: ClubRepository = Depends(get_club_repository),
    user: User = Depends(require_coordinator),
):
    return ClubRead.model_validate(club_service.update_club(repo, user, club_id, body))


@router.delete("/{club_id}", response_model=MessageResponse)
def delete_club(
    club_id: int,
    repo: ClubRepository = Depends(get_club_repository),
    user: User = Depends(require_coordinator),
):
    club_service.delete_club(repo, user, club_id)
    return MessageResponse(message="Club deleted successfully")


@router.post("/{club_id}/members", response_model=ClubRead)
def add_member(
    club_id: int,
    body: MemberAdd,
    repo: ClubRepository = Depends(get_club_repository),
    user_repo: UserRepository = Depends(get_user_repository),
    user: User = Depends(require_coordinator),
):
    club = club_service.add_member(repo, user_repo, user, club_id, body.student_id)
    return ClubRead.model_validate(club)


@router.delete("/{club_id}/members/{member_id}", response_model=ClubRead)
def remove_member(
    club_id: int,
    member_id: str,
    repo: ClubRepository = Depends(get_club_repository),
    user: User = Depends(require_coordinator),
):
    # Non-numeric ids match no member
    target = int(member_id) if member_id.isdecimal() else None
    return ClubRead.model_validate(club_service.remove_member(repo, user, club_id, target))


@router.post("/{club_id}/enroll", response_model=ClubRead)
def enroll(
    club_id: int,
    repo: ClubRepository = Depends(get_club_repository),
    user: User = Depends(require_student),
):
    return ClubRead.model_validate(club_service.self_enroll(repo, user, club_id))


@router.post("/{club_id}/events", response_model=ClubRead)
def add_event(
    club_id: int,
    body: EventCreate,
    repo: ClubRepository = Depends(get_club_repository),
    notification_repo: NotificationRepository = Depends(get_notification_repository),
    user: User = Depends(require_coordinator),
):
    club = club_service.add_event(repo, notification_repo, user, club_id, body)
    return ClubRead.model_validate(club)


@router.delete("/{club_id}/events/by-id/{event_id}", response_model=ClubRead)
def delete_event_by_id(
    club_id: int,
    event_id: int,
    repo: ClubRepository = Depends(get_club_repository),
    user: User = Depends(require_coordinator),
):
    return ClubRead.model_validate(club_service.delete_event_by_id(repo, user, club_id, event_id))


@router.delete("/{club_id}/events/{event_index}", response_model=ClubRead)
def delete_event(
    club_id: int,
    event_index: int,
    repo: ClubRepository = Depends(get_club_repository),
    user: User = Depends(require_coordinator),
):
    return ClubRead.model_validate(club_service.delete_event(repo, user, club_id, event_index))
