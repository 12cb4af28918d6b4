from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from ..core.statuses import RESET_PENDING
from ..db.session import Base


class PasswordResetRequest(Base):
    """A faculty member's request for an administrator to set a new password."""

    __tablename__ = "password_reset_requests"

    id = Column(Integer, primary_key=True, index=True)
    faculty_id = Column(
        Integer,
        ForeignKey("faculty.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    status = Column(Text, nullable=False, default=RESET_PENDING, index=True)
    requested_at = Column(Text, nullable=False)
    resolved_at = Column(Text, nullable=True)
    resolved_by = Column(Integer, ForeignKey("users.id"), nullable=True)

    faculty = relationship("Faculty", back_populates="password_requests", lazy="joined")
    resolved_by_admin = relationship("User", lazy="joined")


__all__ = ["PasswordResetRequest"]
