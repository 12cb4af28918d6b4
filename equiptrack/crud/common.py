"""Commit helper that turns database constraint violations into domain errors."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.errors import DuplicateError, ReferencedError

UNIQUE_VIOLATION = "unique"
FOREIGN_KEY_VIOLATION = "foreign_key"

# SQLSTATE codes reported by PostgreSQL drivers.
_PG_UNIQUE = "23505"
_PG_FOREIGN_KEY = "23503"


def classify_integrity_error(exc: IntegrityError) -> str | None:
    orig = exc.orig
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code == _PG_UNIQUE:
        return UNIQUE_VIOLATION
    if code == _PG_FOREIGN_KEY:
        return FOREIGN_KEY_VIOLATION
    message = str(orig).lower()
    if "unique constraint" in message or "duplicate key" in message:
        return UNIQUE_VIOLATION
    if "foreign key constraint" in message:
        return FOREIGN_KEY_VIOLATION
    return None


def commit_or_raise(db: Session, entity: str) -> None:
    """Commit the session, translating unique/foreign-key failures.

    The session is rolled back before a domain error is raised. Any other
    integrity failure propagates unchanged.
    """

    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        kind = classify_integrity_error(exc)
        if kind == UNIQUE_VIOLATION:
            raise DuplicateError(f"A {entity} with the same unique value already exists") from exc
        if kind == FOREIGN_KEY_VIOLATION:
            raise ReferencedError(
                f"Cannot delete this {entity} because it is referenced by other records"
            ) from exc
        raise


__all__ = [
    "FOREIGN_KEY_VIOLATION",
    "UNIQUE_VIOLATION",
    "classify_integrity_error",
    "commit_or_raise",
]
