from __future__ import annotations

import time

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.timestamps import utcnow_iso
from ..db.session import get_db
from ..models.category import Category

router = APIRouter(prefix="/health", tags=["health"])

_STARTED = time.monotonic()


@router.get("")
def health():
    return {
        "success": True,
        "data": {
            "status": "ok",
            "uptime": round(time.monotonic() - _STARTED, 3),
            "timestamp": utcnow_iso(),
        },
    }


@router.get("/db")
def health_db(db: Session = Depends(get_db)):
    try:
        count = db.execute(select(func.count(Category.id))).scalar_one()
    except SQLAlchemyError as exc:
        raise HTTPException(status_code=503, detail="Database connection failed") from exc
    return {"success": True, "data": {"message": "Database connection successful", "count": count}}
