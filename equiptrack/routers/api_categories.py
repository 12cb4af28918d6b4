from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..crud.categories import (
    create_category,
    delete_category,
    get_category,
    list_categories,
    update_category,
)
from ..db.session import get_db
from ..deps.auth import require_user
from ..schemas.category import CategoryCreate, CategoryOut, CategoryUpdate
from ..schemas.common import Envelope, ok

router = APIRouter(prefix="/categories", tags=["categories"], dependencies=[Depends(require_user)])


def _get_or_404(db: Session, category_id: int):
    category = get_category(db, category_id)
    if not category:
        raise HTTPException(404, f"Category with ID {category_id} not found")
    return category


@router.post("", response_model=Envelope[CategoryOut], status_code=201)
def api_create_category(payload: CategoryCreate, db: Session = Depends(get_db)):
    try:
        return ok(create_category(db, payload.model_dump(exclude_unset=True)))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.get("", response_model=Envelope[list[CategoryOut]])
def api_list_categories(db: Session = Depends(get_db)):
    return ok(list_categories(db))


@router.get("/{category_id}", response_model=Envelope[CategoryOut])
def api_get_category(category_id: int, db: Session = Depends(get_db)):
    return ok(_get_or_404(db, category_id))


@router.patch("/{category_id}", response_model=Envelope[CategoryOut])
def api_update_category(category_id: int, payload: CategoryUpdate, db: Session = Depends(get_db)):
    category = _get_or_404(db, category_id)
    try:
        return ok(update_category(db, category, payload.model_dump(exclude_unset=True)))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.delete("/{category_id}", response_model=Envelope[CategoryOut])
def api_delete_category(category_id: int, db: Session = Depends(get_db)):
    category = _get_or_404(db, category_id)
    snapshot = CategoryOut.model_validate(category)
    try:
        delete_category(db, category)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return ok(snapshot)
