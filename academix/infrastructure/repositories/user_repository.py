"""
SQLAlchemy Implementation of User Repository.
"""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from academix.domain.models.role import Role, RoleName
from academix.domain.models.user import User
from academix.domain.repositories.user_repository import UserRepository
from academix.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def get_by_student_id(self, student_id: str) -> Optional[User]:
        return self.db.query(User).filter(User.student_id == student_id).first()

    def find_student(self, student_id: str) -> Optional[User]:
        return (
            self.db.query(User)
            .join(Role, User.role_id == Role.id)
            .filter(User.student_id == student_id, Role.name == RoleName.STUDENT.value)
            .first()
        )

    def coordinator_id_exists(self, coordinator_id: str) -> bool:
        return (
            self.db.query(User.id).filter(User.coordinator_id == coordinator_id).first()
            is not None
        )

    def get_role(self, name: RoleName) -> Optional[Role]:
        return self.db.query(Role).filter(Role.name == RoleName(name).value).first()

    def get_or_create_role(self, name: RoleName) -> Role:
        role = self.get_role(name)
        if role:
            return role

        role = Role(name=RoleName(name).value, permissions=[])
        self.db.add(role)
        try:
            self.db.commit()
        except IntegrityError:
            # Created concurrently by another registration
            self.db.rollback()
            return self.get_role(name)
        self.db.refresh(role)
        return role

    def list_ids_by_role(self, name: RoleName) -> List[int]:
        rows = (
            self.db.query(User.id)
            .join(Role, User.role_id == Role.id)
            .filter(Role.name == RoleName(name).value)
            .order_by(User.id)
            .all()
        )
        return [r[0] for r in rows]

    def touch_last_login(self, user: User) -> User:
        user.last_login = datetime.now(timezone.utc)
        self.db.commit()
        self.db.refresh(user)
        return user
