"""Administrator accounts that sign in to the dashboard with an email."""

from __future__ import annotations

from sqlalchemy import Column, Integer, Text

from ..core.security import ROLE_SUPER_ADMIN
from ..db.session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False, unique=True, index=True)
    password_hash = Column(Text, nullable=False)
    role = Column(Text, nullable=False, default=ROLE_SUPER_ADMIN)
    created_at = Column(Text, nullable=False)
    updated_at = Column(Text, nullable=False)


__all__ = ["User"]
