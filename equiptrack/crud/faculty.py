"""CRUD helpers for faculty accounts."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..core.security import hash_password
from ..core.statuses import (
    FACULTY_ACTIVE,
    normalize_employee_id,
    normalize_faculty_status,
)
from ..core.timestamps import utcnow_iso
from ..models.faculty import Faculty
from .common import commit_or_raise


def list_faculty(db: Session) -> list[Faculty]:
    return db.execute(select(Faculty).order_by(Faculty.id)).scalars().all()


def get_faculty(db: Session, faculty_id: int) -> Faculty | None:
    return db.get(Faculty, faculty_id)


def get_faculty_by_employee_id(db: Session, employee_id: str) -> Faculty | None:
    stmt = select(Faculty).where(Faculty.employee_id == normalize_employee_id(employee_id))
    return db.execute(stmt).scalars().first()


def create_faculty(db: Session, payload: dict) -> Faculty:
    name = (payload.get("name") or "").strip()
    if not name:
        raise ValueError("name is required")
    employee_id = normalize_employee_id(payload.get("employee_id") or "")
    if not employee_id:
        raise ValueError("employee_id is required")
    password = payload.get("password")
    if not password:
        raise ValueError("password is required")
    now = utcnow_iso()
    faculty = Faculty(
        name=name,
        employee_id=employee_id,
        password_hash=hash_password(password),
        status=normalize_faculty_status(payload.get("status") or FACULTY_ACTIVE),
        department=(payload.get("department") or "").strip() or None,
        created_at=now,
        updated_at=now,
    )
    db.add(faculty)
    commit_or_raise(db, "faculty")
    db.refresh(faculty)
    return faculty


def update_faculty(db: Session, faculty: Faculty, payload: dict) -> Faculty:
    """Apply a partial update. ``None`` values are treated as "not supplied"."""

    if payload.get("name") is not None:
        name = payload["name"].strip()
        if not name:
            raise ValueError("name is required")
        faculty.name = name
    if payload.get("employee_id") is not None:
        employee_id = normalize_employee_id(payload["employee_id"])
        if not employee_id:
            raise ValueError("employee_id is required")
        faculty.employee_id = employee_id
    if payload.get("password") is not None:
        faculty.password_hash = hash_password(payload["password"])
    if payload.get("status") is not None:
        faculty.status = normalize_faculty_status(payload["status"])
    if "department" in payload:
        faculty.department = (payload.get("department") or "").strip() or None
    faculty.updated_at = utcnow_iso()
    commit_or_raise(db, "faculty")
    db.refresh(faculty)
    return faculty


def set_faculty_password(db: Session, faculty: Faculty, password: str, *, commit: bool = True) -> Faculty:
    faculty.password_hash = hash_password(password)
    faculty.updated_at = utcnow_iso()
    if commit:
        db.commit()
        db.refresh(faculty)
    return faculty


def delete_faculty(db: Session, faculty: Faculty) -> None:
    db.delete(faculty)
    commit_or_raise(db, "faculty")
