"""Club service — club lifecycle, membership and events with ownership checks.

Role restrictions are applied by the authorization gate before these
functions run; here every mutation of an existing club additionally requires
the principal to be the club's coordinator.
"""

from typing import List, Optional

import structlog
from sqlalchemy.exc import IntegrityError

from academix.core.exceptions import (
    ConflictException,
    EntityNotFoundException,
    ForbiddenException,
    InvalidIndexException,
)
from academix.domain.models.club import Club
from academix.domain.models.user import User
from academix.domain.repositories.club_repository import ClubRepository
from academix.domain.repositories.notification_repository import NotificationRepository
from academix.domain.repositories.user_repository import UserRepository
from academix.domain.schemas.club import ClubCreate, ClubUpdate, EventCreate
from academix.application.services.notification_service import notify_new_club, notify_new_event

logger = structlog.get_logger(__name__)


def is_owner(club: Club, principal: User) -> bool:
    return club.coordinator_id == principal.id


def list_clubs(repo: ClubRepository) -> List[Club]:
    return repo.list_newest_first()


def get_club(repo: ClubRepository, club_id: int) -> Club:
    club = repo.get_by_id(club_id)
    if club is None:
        raise EntityNotFoundException("Club not found")
    return club


def get_owned_club(repo: ClubRepository, principal: User, club_id: int, action: str) -> Club:
    """Load a club and require the principal to be its coordinator."""
    club = get_club(repo, club_id)
    if not is_owner(club, principal):
        logger.info("Ownership check failed", club_id=club_id, user_id=principal.id, action=action)
        raise ForbiddenException(f"Not authorized to {action} this club")
    return club


def create_club(
    repo: ClubRepository,
    user_repo: UserRepository,
    notification_repo: NotificationRepository,
    principal: User,
    body: ClubCreate,
) -> Club:
    if repo.name_taken(body.name):
        raise ConflictException("Club with this name already exists")

    try:
        club = repo.create(
            {
                "name": body.name,
                "description": body.description or "",
                "coordinator_id": principal.id,
            }
        )
    except IntegrityError:
        raise ConflictException("Club with this name already exists")

    logger.info("Club created", club_id=club.id, coordinator_id=principal.id)
    notify_new_club(user_repo, notification_repo, club)
    return club


def update_club(repo: ClubRepository, principal: User, club_id: int, body: ClubUpdate) -> Club:
    club = get_owned_club(repo, principal, club_id, "update")

    changes = {}
    if body.name:
        if body.name != club.name and repo.name_taken(body.name, exclude_id=club.id):
            raise ConflictException("Club with this name already exists")
        changes["name"] = body.name
    if body.description is not None:
        changes["description"] = body.description

    if not changes:
        return club

    try:
        club = repo.update(club, changes)
    except IntegrityError:
        raise ConflictException("Club with this name already exists")
    logger.info("Club updated", club_id=club.id, fields=sorted(changes))
    return club


def delete_club(repo: ClubRepository, principal: User, club_id: int) -> None:
    """Delete a club with its members and events; notifications are kept."""
    get_owned_club(repo, principal, club_id, "delete")
    repo.delete(club_id)
    logger.info("Club deleted", club_id=club_id, coordinator_id=principal.id)


def add_member(
    repo: ClubRepository,
    user_repo: UserRepository,
    principal: User,
    club_id: int,
    student_id: str,
) -> Club:
    club = get_owned_club(repo, principal, club_id, "add members to")

    student = user_repo.find_student(student_id)
    if student is None:
        raise EntityNotFoundException("Student not found")

    if repo.is_member(club.id, student.id) or not repo.add_member(club.id, student.id):
        raise ConflictException("Student is already a member of this club")

    logger.info("Member added", club_id=club.id, user_id=student.id)
    return club


def remove_member(
    repo: ClubRepository, principal: User, club_id: int, member_id: Optional[int]
) -> Club:
    club = get_owned_club(repo, principal, club_id, "remove members from")
    removed = repo.remove_member(club.id, member_id) if member_id is not None else 0
    logger.info("Member removed", club_id=club.id, user_id=member_id, removed=removed)
    return club


def self_enroll(repo: ClubRepository, principal: User, club_id: int) -> Club:
    club = get_club(repo, club_id)

    if repo.is_member(club.id, principal.id) or not repo.add_member(club.id, principal.id):
        raise ConflictException("You are already a member of this club")

    logger.info("Student enrolled", club_id=club.id, user_id=principal.id)
    return club


def add_event(
    repo: ClubRepository,
    notification_repo: NotificationRepository,
    principal: User,
    club_id: int,
    body: EventCreate,
) -> Club:
    club = get_owned_club(repo, principal, club_id, "add events to")

    event = repo.add_event(
        club.id,
        title=body.title,
        date=body.date,
        description=body.description or "",
        location=body.location or "",
    )
    logger.info("Event added", club_id=club.id, event_id=event.id)

    notify_new_event(notification_repo, club, event)
    return club


def delete_event(repo: ClubRepository, principal: User, club_id: int, position: int) -> Club:
    """Delete the event at a zero-based position of the club's event list."""
    club = get_owned_club(repo, principal, club_id, "delete events from")

    event_ids = repo.event_ids(club.id)
    if position < 0 or position >= len(event_ids):
        raise InvalidIndexException("Invalid event index")

    if not repo.delete_event(club.id, event_ids[position]):
        raise EntityNotFoundException("Event not found")

    logger.info("Event deleted", club_id=club.id, event_id=event_ids[position], position=position)
    return club


def delete_event_by_id(repo: ClubRepository, principal: User, club_id: int, event_id: int) -> Club:
    club = get_owned_club(repo, principal, club_id, "delete events from")

    if not repo.delete_event(club.id, event_id):
        raise EntityNotFoundException("Event not found")

    logger.info("Event deleted", club_id=club.id, event_id=event_id)
    return club
