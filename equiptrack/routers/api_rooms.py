from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..crud.rooms import create_room, delete_room, get_room, list_rooms, update_room
from ..db.session import get_db
from ..deps.auth import require_user
from ..schemas.common import Envelope, ok
from ..schemas.room import RoomCreate, RoomOut, RoomUpdate

router = APIRouter(prefix="/rooms", tags=["rooms"], dependencies=[Depends(require_user)])


def _get_or_404(db: Session, room_id: int):
    room = get_room(db, room_id)
    if not room:
        raise HTTPException(404, f"Room with ID {room_id} not found")
    return room


@router.post("", response_model=Envelope[RoomOut], status_code=201)
def api_create_room(payload: RoomCreate, db: Session = Depends(get_db)):
    try:
        return ok(create_room(db, payload.model_dump(exclude_unset=True)))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.get("", response_model=Envelope[list[RoomOut]])
def api_list_rooms(db: Session = Depends(get_db)):
    return ok(list_rooms(db))


@router.get("/{room_id}", response_model=Envelope[RoomOut])
def api_get_room(room_id: int, db: Session = Depends(get_db)):
    return ok(_get_or_404(db, room_id))


@router.patch("/{room_id}", response_model=Envelope[RoomOut])
def api_update_room(room_id: int, payload: RoomUpdate, db: Session = Depends(get_db)):
    room = _get_or_404(db, room_id)
    try:
        return ok(update_room(db, room, payload.model_dump(exclude_unset=True)))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.delete("/{room_id}", response_model=Envelope[RoomOut])
def api_delete_room(room_id: int, db: Session = Depends(get_db)):
    room = _get_or_404(db, room_id)
    snapshot = RoomOut.model_validate(room)
    try:
        delete_room(db, room)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return ok(snapshot)
