"""Append-only status and location history for equipment."""

from __future__ import annotations

from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from ..core.errors import InvalidReferenceError
from ..core.timestamps import utcnow_iso
from ..models.equipment import EquipmentLocationHistory, EquipmentStatusHistory
from ..models.user import User
from .common import commit_or_raise


def _ensure_user_exists(db: Session, user_id: int | None) -> None:
    if user_id is not None and db.get(User, user_id) is None:
        raise InvalidReferenceError(f"User with ID {user_id} does not exist")


def list_status_entries(db: Session, equipment_id: int) -> list[EquipmentStatusHistory]:
    stmt = (
        select(EquipmentStatusHistory)
        .where(EquipmentStatusHistory.equipment_id == equipment_id)
        .order_by(desc(EquipmentStatusHistory.changed_at), desc(EquipmentStatusHistory.id))
    )
    return db.execute(stmt).unique().scalars().all()


def record_status(
    db: Session,
    *,
    equipment_id: int,
    status: str,
    notes: str | None = None,
    changed_by_id: int | None = None,
    changed_at: str | None = None,
) -> EquipmentStatusHistory:
    """Append a status entry. The caller is expected to have checked the equipment."""

    value = (status or "").strip()
    if not value:
        raise ValueError("status is required")
    _ensure_user_exists(db, changed_by_id)
    entry = EquipmentStatusHistory(
        equipment_id=equipment_id,
        status=value,
        notes=(notes or "").strip() or None,
        changed_by_id=changed_by_id,
        changed_at=changed_at or utcnow_iso(),
    )
    db.add(entry)
    commit_or_raise(db, "status entry")
    db.refresh(entry)
    return entry


def list_location_entries(db: Session, equipment_id: int) -> list[EquipmentLocationHistory]:
    stmt = (
        select(EquipmentLocationHistory)
        .where(EquipmentLocationHistory.equipment_id == equipment_id)
        .order_by(desc(EquipmentLocationHistory.assigned_at), desc(EquipmentLocationHistory.id))
    )
    return db.execute(stmt).unique().scalars().all()


def latest_location(db: Session, equipment_id: int) -> EquipmentLocationHistory | None:
    stmt = (
        select(EquipmentLocationHistory)
        .where(EquipmentLocationHistory.equipment_id == equipment_id)
        .order_by(desc(EquipmentLocationHistory.assigned_at), desc(EquipmentLocationHistory.id))
        .limit(1)
    )
    return db.execute(stmt).unique().scalars().first()


def record_location(
    db: Session,
    *,
    equipment_id: int,
    room_id: int,
    assigned_by_id: int | None = None,
    assigned_at: str | None = None,
) -> EquipmentLocationHistory:
    """Append a location entry unless the equipment is already in ``room_id``."""

    _ensure_user_exists(db, assigned_by_id)
    current = latest_location(db, equipment_id)
    if current is not None and current.room_id == room_id:
        raise ValueError(f"Equipment {equipment_id} is already assigned to room {room_id}")
    entry = EquipmentLocationHistory(
        equipment_id=equipment_id,
        room_id=room_id,
        assigned_by_id=assigned_by_id,
        assigned_at=assigned_at or utcnow_iso(),
    )
    db.add(entry)
    commit_or_raise(db, "location entry")
    db.refresh(entry)
    return entry
