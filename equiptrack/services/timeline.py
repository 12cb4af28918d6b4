"""Merged, newest-first views over the status and location history tables.

Both the per-equipment timeline and the global recent-activity feed read the
two history tables separately, map each row to a small event dict and sort
the combined list by timestamp. Timestamps share one fixed ISO format, so the
string sort is chronological.
"""

from __future__ import annotations

from datetime import timedelta

from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from ..core.statuses import EQUIPMENT_MAINTENANCE, normalize_equipment_status
from ..core.timestamps import iso_since
from ..models.equipment import EquipmentLocationHistory, EquipmentStatusHistory

TIMELINE_RANGES: dict[str, timedelta] = {
    "24h": timedelta(hours=24),
    "7d": timedelta(days=7),
    "30d": timedelta(days=30),
}
DEFAULT_RANGE = "24h"
FACULTY_NOTE_PREFIX = "Faculty reassigned"
DEFAULT_ACTIVITY_LIMIT = 12


def resolve_range(value: str | None) -> timedelta:
    key = (value or DEFAULT_RANGE).strip().lower() or DEFAULT_RANGE
    try:
        return TIMELINE_RANGES[key]
    except KeyError:
        raise ValueError(f"range must be one of {', '.join(TIMELINE_RANGES)}") from None


def _status_event_type(entry: EquipmentStatusHistory) -> str:
    if normalize_equipment_status(entry.status) == EQUIPMENT_MAINTENANCE:
        return "MAINTENANCE"
    if (entry.notes or "").startswith(FACULTY_NOTE_PREFIX):
        return "FACULTY"
    return "STATUS"


def _status_event(entry: EquipmentStatusHistory) -> dict[str, str]:
    description = f"Status changed to {entry.status}"
    if entry.notes:
        description = f"{description}: {entry.notes}"
    return {
        "id": f"status-{entry.id}",
        "type": _status_event_type(entry),
        "description": description,
        "created_at": entry.changed_at,
    }


def _location_event(entry: EquipmentLocationHistory) -> dict[str, str]:
    room = entry.room
    description = f"Moved to {room.name}"
    if room.building:
        description = f"{description} ({room.building})"
    return {
        "id": f"location-{entry.id}",
        "type": "LOCATION",
        "description": description,
        "created_at": entry.assigned_at,
    }


def merge_events(*groups: list[dict[str, str]], limit: int | None = None) -> list[dict[str, str]]:
    """Concatenate event groups and sort newest first (stable on ties)."""

    merged = [event for group in groups for event in group]
    merged.sort(key=lambda event: event["created_at"], reverse=True)
    return merged[:limit] if limit is not None else merged


def equipment_timeline(db: Session, equipment_id: int, range_key: str | None = None) -> list[dict[str, str]]:
    since = iso_since(resolve_range(range_key))
    status_rows = db.execute(
        select(EquipmentStatusHistory)
        .where(
            EquipmentStatusHistory.equipment_id == equipment_id,
            EquipmentStatusHistory.changed_at >= since,
        )
        .order_by(desc(EquipmentStatusHistory.changed_at), desc(EquipmentStatusHistory.id))
    ).unique().scalars().all()
    location_rows = db.execute(
        select(EquipmentLocationHistory)
        .where(
            EquipmentLocationHistory.equipment_id == equipment_id,
            EquipmentLocationHistory.assigned_at >= since,
        )
        .order_by(desc(EquipmentLocationHistory.assigned_at), desc(EquipmentLocationHistory.id))
    ).unique().scalars().all()
    return merge_events(
        [_status_event(row) for row in status_rows],
        [_location_event(row) for row in location_rows],
    )


def recent_activities(db: Session, limit: int = DEFAULT_ACTIVITY_LIMIT) -> list[dict[str, str]]:
    status_rows = db.execute(
        select(EquipmentStatusHistory)
        .order_by(desc(EquipmentStatusHistory.changed_at), desc(EquipmentStatusHistory.id))
        .limit(limit)
    ).unique().scalars().all()
    location_rows = db.execute(
        select(EquipmentLocationHistory)
        .order_by(desc(EquipmentLocationHistory.assigned_at), desc(EquipmentLocationHistory.id))
        .limit(limit)
    ).unique().scalars().all()

    status_events = [
        {
            "id": f"status-{row.id}",
            "description": (
                f"Status updated to {row.status} for {row.equipment.name} ({row.equipment.serial_number})"
            ),
            "created_at": row.changed_at,
        }
        for row in status_rows
    ]
    location_events = [
        {
            "id": f"location-{row.id}",
            "description": (
                f"{row.equipment.name} ({row.equipment.serial_number}) assigned to {row.room.name}"
            ),
            "created_at": row.assigned_at,
        }
        for row in location_rows
    ]
    return merge_events(status_events, location_events, limit=limit)
