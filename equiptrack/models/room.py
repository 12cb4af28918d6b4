from __future__ import annotations

from sqlalchemy import Column, Integer, Text

from ..db.session import Base


class Room(Base):
    __tablename__ = "rooms"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False, unique=True)
    building = Column(Text, nullable=True)
    floor = Column(Text, nullable=True)


__all__ = ["Room"]
