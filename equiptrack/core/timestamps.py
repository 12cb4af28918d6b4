"""UTC timestamp helpers.

Every timestamp column is stored as ``YYYY-MM-DDTHH:MM:SSZ`` text so that
plain string comparison orders rows chronologically.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

ISO_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


def to_iso(value: datetime | date) -> str:
    """Render a datetime (naive values are taken as UTC) in the storage format."""

    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    elif value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime(ISO_FORMAT)


def utcnow_iso() -> str:
    return to_iso(utcnow())


def iso_since(delta: timedelta, *, now: datetime | None = None) -> str:
    """Return the storage-format timestamp ``delta`` before ``now``."""

    return to_iso((now or utcnow()) - delta)


__all__ = ["ISO_FORMAT", "iso_since", "to_iso", "utcnow", "utcnow_iso"]
