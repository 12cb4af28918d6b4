"""Equipment items and their append-only status/location history."""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from ..db.session import Base


class Equipment(Base):
    """A tracked asset owned by a faculty member.

    ``current_status`` and ``current_room`` are not columns; the CRUD layer
    attaches them from the newest history rows before serialisation.
    """

    __tablename__ = "equipment"

    id = Column(Integer, primary_key=True, index=True)
    serial_number = Column(Text, nullable=False, unique=True, index=True)
    name = Column(Text, nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    faculty_id = Column(Integer, ForeignKey("faculty.id"), nullable=False, index=True)
    date_purchased = Column(Text, nullable=False)
    created_at = Column(Text, nullable=False)
    updated_at = Column(Text, nullable=False)

    category = relationship("Category", lazy="joined")
    faculty = relationship("Faculty", lazy="joined")
    status_history = relationship(
        "EquipmentStatusHistory",
        back_populates="equipment",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    location_history = relationship(
        "EquipmentLocationHistory",
        back_populates="equipment",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class EquipmentStatusHistory(Base):
    __tablename__ = "equipment_status_history"

    id = Column(Integer, primary_key=True, index=True)
    equipment_id = Column(
        Integer,
        ForeignKey("equipment.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    status = Column(Text, nullable=False)
    notes = Column(Text, nullable=True)
    changed_by_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    changed_at = Column(Text, nullable=False, index=True)

    equipment = relationship("Equipment", back_populates="status_history")
    changed_by = relationship("User", lazy="joined")


class EquipmentLocationHistory(Base):
    __tablename__ = "equipment_location_history"

    id = Column(Integer, primary_key=True, index=True)
    equipment_id = Column(
        Integer,
        ForeignKey("equipment.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    room_id = Column(Integer, ForeignKey("rooms.id"), nullable=False, index=True)
    assigned_by_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    assigned_at = Column(Text, nullable=False, index=True)

    equipment = relationship("Equipment", back_populates="location_history")
    room = relationship("Room", lazy="joined")
    assigned_by = relationship("User", lazy="joined")


__all__ = ["Equipment", "EquipmentLocationHistory", "EquipmentStatusHistory"]
