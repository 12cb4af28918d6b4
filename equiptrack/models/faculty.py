"""Faculty members: equipment custodians who sign in with an employee id."""

from __future__ import annotations

from sqlalchemy import Column, Integer, Text
from sqlalchemy.orm import relationship

from ..core.statuses import FACULTY_ACTIVE
from ..db.session import Base


class Faculty(Base):
    __tablename__ = "faculty"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    employee_id = Column(Text, nullable=False, unique=True, index=True)
    password_hash = Column(Text, nullable=True)
    status = Column(Text, nullable=False, default=FACULTY_ACTIVE)
    department = Column(Text, nullable=True)
    created_at = Column(Text, nullable=False)
    updated_at = Column(Text, nullable=False)

    password_requests = relationship(
        "PasswordResetRequest",
        back_populates="faculty",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


__all__ = ["Faculty"]
