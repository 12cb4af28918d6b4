"""Equipment counts bucketed by current status for the dashboard."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from sqlalchemy.orm import Session

from ..core.statuses import (
    EQUIPMENT_ASSIGNED,
    EQUIPMENT_AVAILABLE,
    EQUIPMENT_DEFECTIVE,
    EQUIPMENT_MAINTENANCE,
    normalize_equipment_status,
)
from ..crud.equipment import list_equipment


def summarize_statuses(statuses: Iterable[str | None]) -> dict[str, int]:
    """Bucket raw current-status strings (``None`` for no history)."""

    counts: Counter[str | None] = Counter(normalize_equipment_status(value) for value in statuses)
    total = sum(counts.values())
    assigned = counts[EQUIPMENT_ASSIGNED]
    available = counts[EQUIPMENT_AVAILABLE]
    return {
        "total_equipment": total,
        "active_equipment": assigned + available,
        "maintenance_count": counts[EQUIPMENT_MAINTENANCE],
        "defective_count": counts[EQUIPMENT_DEFECTIVE],
        "assigned_count": assigned,
        "available_count": available,
        "uncategorized_count": counts[None],
    }


def equipment_summary(db: Session) -> dict[str, int]:
    items = list_equipment(db)
    return summarize_statuses(
        item.current_status.status if item.current_status is not None else None for item in items
    )


def dashboard_stats(db: Session) -> dict[str, int]:
    summary = equipment_summary(db)
    return {
        "total_equipment": summary["total_equipment"],
        "active_equipment": summary["active_equipment"],
        "maintenance_count": summary["maintenance_count"],
    }
