"""CRUD helpers for rooms that equipment can be assigned to."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models.room import Room
from .common import commit_or_raise

_OPTIONAL_FIELDS = ("building", "floor")


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


def list_rooms(db: Session) -> list[Room]:
    return db.execute(select(Room).order_by(Room.id)).scalars().all()


def get_room(db: Session, room_id: int) -> Room | None:
    return db.get(Room, room_id)


def create_room(db: Session, payload: dict) -> Room:
    name = _clean(payload.get("name"))
    if not name:
        raise ValueError("name is required")
    room = Room(name=name, **{field: _clean(payload.get(field)) for field in _OPTIONAL_FIELDS})
    db.add(room)
    commit_or_raise(db, "room")
    db.refresh(room)
    return room


def update_room(db: Session, room: Room, payload: dict) -> Room:
    if "name" in payload:
        name = _clean(payload.get("name"))
        if not name:
            raise ValueError("name is required")
        room.name = name
    for field in _OPTIONAL_FIELDS:
        if field in payload:
            setattr(room, field, _clean(payload.get(field)))
    commit_or_raise(db, "room")
    db.refresh(room)
    return room


def delete_room(db: Session, room: Room) -> None:
    db.delete(room)
    commit_or_raise(db, "room")
