from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..crud.equipment import equipment_exists
from ..crud.history import list_status_entries, record_status
from ..db.session import get_db
from ..deps.auth import Principal, require_user
from ..schemas.common import Envelope, ok
from ..schemas.history import StatusCreate, StatusEntryOut

router = APIRouter(prefix="/status-history", tags=["status-history"])


@router.post("", response_model=Envelope[StatusEntryOut], status_code=201)
def api_record_status(
    payload: StatusCreate,
    principal: Principal = Depends(require_user),
    db: Session = Depends(get_db),
):
    if not equipment_exists(db, payload.equipment_id):
        raise HTTPException(404, f"Equipment with ID {payload.equipment_id} not found")
    changed_by_id = payload.changed_by_id
    if changed_by_id is None and principal.is_admin:
        changed_by_id = principal.id
    try:
        entry = record_status(
            db,
            equipment_id=payload.equipment_id,
            status=payload.status,
            notes=payload.notes,
            changed_by_id=changed_by_id,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return ok(entry)


@router.get(
    "/equipment/{equipment_id}",
    response_model=Envelope[list[StatusEntryOut]],
    dependencies=[Depends(require_user)],
)
def api_list_status_history(equipment_id: int, db: Session = Depends(get_db)):
    if not equipment_exists(db, equipment_id):
        raise HTTPException(404, f"Equipment with ID {equipment_id} not found")
    return ok(list_status_entries(db, equipment_id))
