"""Shared status constants and normalisation helpers."""

EQUIPMENT_ASSIGNED = "ASSIGNED"
EQUIPMENT_AVAILABLE = "AVAILABLE"
EQUIPMENT_MAINTENANCE = "MAINTENANCE"
EQUIPMENT_DEFECTIVE = "DEFECTIVE"

EQUIPMENT_STATUS_CHOICES = (
    EQUIPMENT_ASSIGNED,
    EQUIPMENT_AVAILABLE,
    EQUIPMENT_MAINTENANCE,
    EQUIPMENT_DEFECTIVE,
)

# Legacy spellings written by older clients and the seed data.
_EQUIPMENT_ALIASES = {
    "ACTIVE": EQUIPMENT_AVAILABLE,
    "WORKING": EQUIPMENT_AVAILABLE,
}

FACULTY_ACTIVE = "ACTIVE"
FACULTY_INACTIVE = "INACTIVE"
FACULTY_STATUS_CHOICES = (FACULTY_ACTIVE, FACULTY_INACTIVE)

RESET_PENDING = "PENDING"
RESET_COMPLETED = "COMPLETED"


def normalize_equipment_status(value: str | None) -> str | None:
    """Map a free-form status string onto one of the known buckets.

    Returns ``None`` for missing or unrecognised values.
    """

    cleaned = (value or "").strip().upper()
    if not cleaned:
        return None
    cleaned = _EQUIPMENT_ALIASES.get(cleaned, cleaned)
    return cleaned if cleaned in EQUIPMENT_STATUS_CHOICES else None


def normalize_faculty_status(value: str | None) -> str:
    cleaned = (value or FACULTY_ACTIVE).strip().upper()
    if cleaned not in FACULTY_STATUS_CHOICES:
        raise ValueError(f"status must be one of {', '.join(FACULTY_STATUS_CHOICES)}")
    return cleaned


def normalize_employee_id(value: str) -> str:
    return value.strip().upper()


def normalize_email(value: str) -> str:
    return value.strip().lower()


__all__ = [
    "EQUIPMENT_ASSIGNED",
    "EQUIPMENT_AVAILABLE",
    "EQUIPMENT_DEFECTIVE",
    "EQUIPMENT_MAINTENANCE",
    "EQUIPMENT_STATUS_CHOICES",
    "FACULTY_ACTIVE",
    "FACULTY_INACTIVE",
    "FACULTY_STATUS_CHOICES",
    "RESET_COMPLETED",
    "RESET_PENDING",
    "normalize_email",
    "normalize_employee_id",
    "normalize_equipment_status",
    "normalize_faculty_status",
]
