from __future__ import annotations

from sqlalchemy import Column, Integer, Text

from ..db.session import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False, unique=True)
    description = Column(Text, nullable=True)


__all__ = ["Category"]
