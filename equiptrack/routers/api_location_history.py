from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..crud.equipment import equipment_exists
from ..crud.history import list_location_entries, record_location
from ..crud.rooms import get_room
from ..db.session import get_db
from ..deps.auth import Principal, require_user
from ..schemas.common import Envelope, ok
from ..schemas.history import LocationCreate, LocationEntryOut

router = APIRouter(prefix="/location-history", tags=["location-history"])


@router.post("", response_model=Envelope[LocationEntryOut], status_code=201)
def api_record_location(
    payload: LocationCreate,
    principal: Principal = Depends(require_user),
    db: Session = Depends(get_db),
):
    if not equipment_exists(db, payload.equipment_id):
        raise HTTPException(404, f"Equipment with ID {payload.equipment_id} not found")
    if get_room(db, payload.room_id) is None:
        raise HTTPException(404, f"Room with ID {payload.room_id} not found")
    assigned_by_id = payload.assigned_by_id
    if assigned_by_id is None and principal.is_admin:
        assigned_by_id = principal.id
    try:
        entry = record_location(
            db,
            equipment_id=payload.equipment_id,
            room_id=payload.room_id,
            assigned_by_id=assigned_by_id,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return ok(entry)


@router.get(
    "/equipment/{equipment_id}",
    response_model=Envelope[list[LocationEntryOut]],
    dependencies=[Depends(require_user)],
)
def api_list_location_history(equipment_id: int, db: Session = Depends(get_db)):
    if not equipment_exists(db, equipment_id):
        raise HTTPException(404, f"Equipment with ID {equipment_id} not found")
    return ok(list_location_entries(db, equipment_id))
