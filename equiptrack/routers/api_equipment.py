from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ..crud.equipment import (
    create_equipment,
    delete_equipment,
    equipment_exists,
    get_equipment,
    list_equipment,
    update_equipment,
)
from ..db.session import get_db
from ..deps.auth import require_user
from ..schemas.common import Envelope, ok
from ..schemas.equipment import (
    EquipmentCreate,
    EquipmentOut,
    EquipmentSummary,
    EquipmentUpdate,
    TimelineEvent,
)
from ..services.summary import equipment_summary
from ..services.timeline import equipment_timeline

# Mounted under both /equipment and /equipments.
router = APIRouter(tags=["equipment"], dependencies=[Depends(require_user)])


def _get_or_404(db: Session, equipment_id: int):
    item = get_equipment(db, equipment_id)
    if not item:
        raise HTTPException(404, f"Equipment with ID {equipment_id} not found")
    return item


def _parse_category_id(raw: str | None) -> int | None:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip(), 10)
    except ValueError:
        raise HTTPException(status_code=400, detail="categoryId must be a valid number") from None


@router.post("", response_model=Envelope[EquipmentOut], status_code=201)
def api_create_equipment(payload: EquipmentCreate, db: Session = Depends(get_db)):
    try:
        return ok(create_equipment(db, payload.model_dump()))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.get("", response_model=Envelope[list[EquipmentOut]])
def api_list_equipment(
    search: str | None = None,
    status: str | None = None,
    category_id: str | None = Query(default=None, alias="categoryId"),
    db: Session = Depends(get_db),
):
    items = list_equipment(db, search=search, status=status, category_id=_parse_category_id(category_id))
    return ok(items)


@router.get("/summary", response_model=Envelope[EquipmentSummary])
def api_equipment_summary(db: Session = Depends(get_db)):
    return ok(equipment_summary(db))


@router.get("/{equipment_id}/timeline", response_model=Envelope[list[TimelineEvent]])
def api_equipment_timeline(
    equipment_id: int,
    range_key: str | None = Query(default=None, alias="range"),
    db: Session = Depends(get_db),
):
    if not equipment_exists(db, equipment_id):
        raise HTTPException(404, f"Equipment with ID {equipment_id} not found")
    try:
        return ok(equipment_timeline(db, equipment_id, range_key))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.get("/{equipment_id}", response_model=Envelope[EquipmentOut])
def api_get_equipment(equipment_id: int, db: Session = Depends(get_db)):
    return ok(_get_or_404(db, equipment_id))


@router.api_route("/{equipment_id}", methods=["PATCH", "PUT"], response_model=Envelope[EquipmentOut])
def api_update_equipment(equipment_id: int, payload: EquipmentUpdate, db: Session = Depends(get_db)):
    item = _get_or_404(db, equipment_id)
    try:
        return ok(update_equipment(db, item, payload.model_dump(exclude_unset=True)))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.delete("/{equipment_id}", response_model=Envelope[EquipmentOut])
def api_delete_equipment(equipment_id: int, db: Session = Depends(get_db)):
    item = _get_or_404(db, equipment_id)
    snapshot = EquipmentOut.model_validate(item)
    try:
        delete_equipment(db, item)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return ok(snapshot)
