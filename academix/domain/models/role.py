"""Role domain model — maps to the 'roles' table."""

import enum

from sqlalchemy import Column, Integer, String, JSON, DateTime
from sqlalchemy.sql import func

from academix.infrastructure.database import Base


class RoleName(str, enum.Enum):
    STUDENT = "Student"
    TEACHER = "Teacher"
    CLUB_COORDINATOR = "Club Coordinator"


class Role(Base):
    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), unique=True, nullable=False, index=True)
    permissions = Column(JSON, nullable=False, default=list)
    description = Column(String(500), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    @property
    def role_name(self) -> RoleName:
        return RoleName(self.name)

    def __repr__(self):
        return f"<Role {self.name}>"
