"""Account creation for administrators and faculty, plus admin lookups."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..core.errors import DuplicateError
from ..core.security import ROLE_SUPER_ADMIN, ROLE_USER, hash_password
from ..core.statuses import normalize_email
from ..core.timestamps import utcnow_iso
from ..models.faculty import Faculty
from ..models.user import User
from .common import commit_or_raise
from .faculty import create_faculty


def list_users(db: Session) -> list[User]:
    return db.execute(select(User).order_by(User.id)).scalars().all()


def get_user(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)


def get_user_by_email(db: Session, email: str) -> User | None:
    stmt = select(User).where(User.email == normalize_email(email))
    return db.execute(stmt).scalars().first()


def create_admin(db: Session, *, name: str, email: str, password: str) -> User:
    name = (name or "").strip()
    if not name:
        raise ValueError("name is required")
    now = utcnow_iso()
    user = User(
        name=name,
        email=normalize_email(email),
        password_hash=hash_password(password),
        role=ROLE_SUPER_ADMIN,
        created_at=now,
        updated_at=now,
    )
    db.add(user)
    commit_or_raise(db, "user")
    db.refresh(user)
    return user


def validate_account_rules(payload: dict) -> str:
    """Check the role-specific identifier rules and return the role."""

    role = (payload.get("role") or "").strip().upper()
    email = payload.get("email")
    employee_id = payload.get("employee_id")
    if role == ROLE_SUPER_ADMIN:
        if not email:
            raise ValueError("Email is required for SUPER_ADMIN")
        if employee_id:
            raise ValueError("employeeId is not allowed for SUPER_ADMIN")
        return role
    if role == ROLE_USER:
        if not employee_id:
            raise ValueError("employeeId is required for USER")
        if email:
            raise ValueError("Email is not allowed for USER")
        return role
    raise ValueError("Invalid role provided")


def create_account(db: Session, payload: dict) -> tuple[str, User | Faculty]:
    """Create an admin ``User`` or a ``Faculty`` member depending on ``role``.

    Raises ``DuplicateError`` with an account-specific message when the email
    or employee id is already taken.
    """

    role = validate_account_rules(payload)
    if role == ROLE_SUPER_ADMIN:
        try:
            user = create_admin(db, name=payload["name"], email=payload["email"], password=payload["password"])
        except DuplicateError as exc:
            raise DuplicateError("SUPER_ADMIN account already exists") from exc
        return role, user
    try:
        faculty = create_faculty(
            db,
            {
                "name": payload["name"],
                "employee_id": payload["employee_id"],
                "password": payload["password"],
            },
        )
    except DuplicateError as exc:
        raise DuplicateError("Faculty account already exists") from exc
    return role, faculty
