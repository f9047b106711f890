"""
User Repository Interface.
Identity store lookups: users, roles and role membership.
"""

from typing import List, Optional

from academix.domain.repositories.base import BaseRepository
from academix.domain.models.role import Role, RoleName
from academix.domain.models.user import User


class UserRepository(BaseRepository[User]):
    """Interface for User and Role operations."""

    def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by (normalized) email."""
        ...

    def get_by_student_id(self, student_id: str) -> Optional[User]:
        """Get any user holding this student id."""
        ...

    def find_student(self, student_id: str) -> Optional[User]:
        """Get the user with role Student and this student id."""
        ...

    def coordinator_id_exists(self, coordinator_id: str) -> bool:
        """Check whether a coordinator id is already assigned."""
        ...

    def get_role(self, name: RoleName) -> Optional[Role]:
        """Get a role by name."""
        ...

    def get_or_create_role(self, name: RoleName) -> Role:
        """Get a role by name, creating it on first use."""
        ...

    def list_ids_by_role(self, name: RoleName) -> List[int]:
        """Ids of every user with the given role."""
        ...

    def touch_last_login(self, user: User) -> User:
        """Stamp the user's last login with the current time."""
        ...
