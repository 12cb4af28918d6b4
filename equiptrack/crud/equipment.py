"""Equipment CRUD helpers.

Equipment rows never store their status or room directly. Both are derived
from the newest status/location history rows and attached to the loaded
instances as ``current_status`` and ``current_room`` before they leave this
module.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import desc, func, or_, select
from sqlalchemy.orm import Session

from ..core.errors import InvalidReferenceError
from ..core.statuses import normalize_equipment_status
from ..core.timestamps import to_iso, utcnow_iso
from ..models.category import Category
from ..models.equipment import Equipment, EquipmentLocationHistory, EquipmentStatusHistory
from ..models.faculty import Faculty
from .common import commit_or_raise

_TEXT_FIELDS = ("serial_number", "name")
UNCATEGORIZED = "UNCATEGORIZED"


def list_equipment(
    db: Session,
    *,
    search: str | None = None,
    status: str | None = None,
    category_id: int | None = None,
) -> list[Equipment]:
    """Return equipment ordered by id, optionally filtered.

    ``search`` matches name, serial number or owner name case-insensitively.
    ``status`` is compared against the normalised current status; ``uncategorized``
    selects items with no history or an unrecognised status.
    """

    stmt = select(Equipment).order_by(Equipment.id)
    if category_id is not None:
        stmt = stmt.where(Equipment.category_id == category_id)
    term = (search or "").strip().lower()
    if term:
        pattern = f"%{term}%"
        stmt = stmt.join(Faculty, Faculty.id == Equipment.faculty_id).where(
            or_(
                func.lower(Equipment.name).like(pattern),
                func.lower(Equipment.serial_number).like(pattern),
                func.lower(Faculty.name).like(pattern),
            )
        )
    items = db.execute(stmt).unique().scalars().all()
    attach_current_state(db, items)
    if status and status.strip():
        if status.strip().upper() == UNCATEGORIZED:
            wanted = None
        else:
            wanted = normalize_equipment_status(status)
            if wanted is None:
                return []
        items = [item for item in items if current_status_bucket(item) == wanted]
    return items


def get_equipment(db: Session, equipment_id: int) -> Equipment | None:
    item = db.get(Equipment, equipment_id)
    if not item:
        return None
    attach_current_state(db, [item])
    return item


def equipment_exists(db: Session, equipment_id: int) -> bool:
    return db.execute(select(Equipment.id).where(Equipment.id == equipment_id)).first() is not None


def validate_relation_ids(db: Session, *, category_id: int | None = None, faculty_id: int | None = None) -> None:
    if category_id is not None and db.get(Category, category_id) is None:
        raise InvalidReferenceError(f"Category with ID {category_id} does not exist")
    if faculty_id is not None and db.get(Faculty, faculty_id) is None:
        raise InvalidReferenceError(f"Faculty with ID {faculty_id} does not exist")


def _purchase_date(value: object) -> str:
    if isinstance(value, datetime):
        return to_iso(value)
    if isinstance(value, str) and value.strip():
        return to_iso(datetime.fromisoformat(value.strip().replace("Z", "+00:00")))
    raise ValueError("date_purchased is required")


def create_equipment(db: Session, payload: dict) -> Equipment:
    data = dict(payload)
    for key in _TEXT_FIELDS:
        value = (data.get(key) or "").strip()
        if not value:
            raise ValueError(f"{key} is required")
        data[key] = value
    validate_relation_ids(db, category_id=data.get("category_id"), faculty_id=data.get("faculty_id"))
    now = utcnow_iso()
    item = Equipment(
        serial_number=data["serial_number"],
        name=data["name"],
        category_id=data["category_id"],
        faculty_id=data["faculty_id"],
        date_purchased=_purchase_date(data.get("date_purchased")),
        created_at=now,
        updated_at=now,
    )
    db.add(item)
    commit_or_raise(db, "equipment")
    db.refresh(item)
    attach_current_state(db, [item])
    return item


def update_equipment(db: Session, item: Equipment, payload: dict) -> Equipment:
    """Apply a partial update; ``None`` values mean "leave unchanged"."""

    data = {key: value for key, value in payload.items() if value is not None}
    validate_relation_ids(db, category_id=data.get("category_id"), faculty_id=data.get("faculty_id"))
    for key in _TEXT_FIELDS:
        if key in data:
            value = data[key].strip()
            if not value:
                raise ValueError(f"{key} is required")
            setattr(item, key, value)
    for key in ("category_id", "faculty_id"):
        if key in data:
            setattr(item, key, data[key])
    if "date_purchased" in data:
        item.date_purchased = _purchase_date(data["date_purchased"])
    item.updated_at = utcnow_iso()
    commit_or_raise(db, "equipment")
    db.refresh(item)
    attach_current_state(db, [item])
    return item


def delete_equipment(db: Session, item: Equipment) -> None:
    db.delete(item)
    commit_or_raise(db, "equipment")


def current_status_bucket(item: Equipment) -> str | None:
    entry = getattr(item, "current_status", None)
    return normalize_equipment_status(entry.status if entry is not None else None)


def _latest_per_equipment(db: Session, model, timestamp, ids: tuple[int, ...]) -> list:
    """Return the newest history row of each equipment id, ties broken by id."""

    ranked = (
        select(
            model.id.label("entry_id"),
            func.row_number()
            .over(partition_by=model.equipment_id, order_by=(desc(timestamp), desc(model.id)))
            .label("position"),
        )
        .where(model.equipment_id.in_(ids))
        .subquery()
    )
    stmt = select(model).join(ranked, ranked.c.entry_id == model.id).where(ranked.c.position == 1)
    return db.execute(stmt).unique().scalars().all()


def attach_current_state(db: Session, items: list[Equipment]) -> None:
    """Set ``current_status`` and ``current_room`` on each item in two queries."""

    if not items:
        return
    equipment_map = {item.id: item for item in items}
    for item in equipment_map.values():
        setattr(item, "current_status", None)
        setattr(item, "current_room", None)
    ids = tuple(equipment_map.keys())

    for entry in _latest_per_equipment(db, EquipmentStatusHistory, EquipmentStatusHistory.changed_at, ids):
        setattr(equipment_map[entry.equipment_id], "current_status", entry)
    for entry in _latest_per_equipment(db, EquipmentLocationHistory, EquipmentLocationHistory.assigned_at, ids):
        setattr(equipment_map[entry.equipment_id], "current_room", entry.room)
