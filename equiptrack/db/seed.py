"""Populate a fresh database with a default admin and sample records.

Every step looks the record up first, so running the command twice leaves
the database unchanged.

Usage::

    equiptrack-seed --admin-email admin@lnu.local --admin-password admin12345
"""

from __future__ import annotations

import argparse
import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..core.config import settings
from ..core.logging import configure_logging
from ..core.statuses import normalize_email
from ..crud.categories import create_category
from ..crud.equipment import create_equipment
from ..crud.faculty import create_faculty, get_faculty_by_employee_id
from ..crud.history import record_location, record_status
from ..crud.rooms import create_room
from ..crud.users import create_admin, get_user_by_email
from ..models.category import Category
from ..models.equipment import Equipment
from ..models.password_request import PasswordResetRequest  # noqa: F401
from ..models.room import Room
from .session import Base, SessionLocal, engine

logger = logging.getLogger("equiptrack.seed")

DEFAULT_ADMIN_EMAIL = "admin@lnu.local"
DEFAULT_ADMIN_PASSWORD = "admin12345"

FACULTY = (
    {"name": "Dr. Santos", "employee_id": "FAC-001", "password": "faculty12345", "department": "IT"},
    {"name": "Prof. Cruz", "employee_id": "FAC-002", "password": "faculty12345", "department": "CS"},
)
CATEGORIES = (
    {"name": "Computer", "description": "Desktops and laptops"},
    {"name": "Projector", "description": "LCD and LED projectors"},
    {"name": "Switch", "description": "Network switches"},
)
ROOM = {"name": "ComLab 1", "building": "Main", "floor": "2"}
EQUIPMENT = {"serial_number": "PC-001", "name": "Dell Optiplex"}


def _by_name(db: Session, model, name: str):
    return db.execute(select(model).where(model.name == name)).scalars().first()


def seed(
    db: Session,
    *,
    admin_email: str = DEFAULT_ADMIN_EMAIL,
    admin_password: str = DEFAULT_ADMIN_PASSWORD,
) -> dict[str, int]:
    """Insert whatever sample data is missing and report how much was created."""

    created = {"users": 0, "faculty": 0, "categories": 0, "rooms": 0, "equipment": 0}

    admin = get_user_by_email(db, admin_email)
    if admin is None:
        admin = create_admin(db, name="Administrator", email=normalize_email(admin_email), password=admin_password)
        created["users"] += 1

    faculty = []
    for row in FACULTY:
        member = get_faculty_by_employee_id(db, row["employee_id"])
        if member is None:
            member = create_faculty(db, row)
            created["faculty"] += 1
        faculty.append(member)

    categories = []
    for row in CATEGORIES:
        category = _by_name(db, Category, row["name"])
        if category is None:
            category = create_category(db, row)
            created["categories"] += 1
        categories.append(category)

    room = _by_name(db, Room, ROOM["name"])
    if room is None:
        room = create_room(db, ROOM)
        created["rooms"] += 1

    existing = db.execute(
        select(Equipment).where(Equipment.serial_number == EQUIPMENT["serial_number"])
    ).scalars().first()
    if existing is None:
        item = create_equipment(
            db,
            {
                **EQUIPMENT,
                "category_id": categories[0].id,
                "faculty_id": faculty[0].id,
                "date_purchased": datetime.now(tz=timezone.utc),
            },
        )
        record_status(db, equipment_id=item.id, status="Working", changed_by_id=admin.id)
        record_location(db, equipment_id=item.id, room_id=room.id, assigned_by_id=admin.id)
        created["equipment"] += 1

    return created


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Seed the equipment tracker database.")
    parser.add_argument("--admin-email", default=DEFAULT_ADMIN_EMAIL, help="email of the default administrator")
    parser.add_argument("--admin-password", default=DEFAULT_ADMIN_PASSWORD, help="password of the default administrator")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(settings.LOG_LEVEL)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        created = seed(db, admin_email=args.admin_email, admin_password=args.admin_password)
    finally:
        db.close()
    logger.info("seed.completed", extra={"extra_data": created})
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
