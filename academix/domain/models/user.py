"""User domain model — maps to the 'users' table."""

from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from academix.infrastructure.database import Base
from academix.domain.models.role import RoleName

YEAR_CHOICES = ("1st Year", "2nd Year", "3rd Year", "4th Year")


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role_id = Column(Integer, ForeignKey("roles.id"), nullable=False)
    student_id = Column(String(50), unique=True, nullable=True, index=True)
    coordinator_id = Column(String(50), unique=True, nullable=True)
    department = Column(String(200), nullable=True)
    year = Column(String(20), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    last_login = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    role = relationship("Role", lazy="joined")

    @property
    def role_name(self) -> RoleName | None:
        return self.role.role_name if self.role else None

    def __repr__(self):
        return f"<User {self.email}>"
