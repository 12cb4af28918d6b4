from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..db.session import get_db
from ..deps.auth import require_user
from ..schemas.common import Envelope, ok
from ..schemas.equipment import Activity, DashboardStats
from ..services.summary import dashboard_stats
from ..services.timeline import DEFAULT_ACTIVITY_LIMIT, recent_activities

router = APIRouter(tags=["dashboard"], dependencies=[Depends(require_user)])


@router.get("/dashboard/stats", response_model=Envelope[DashboardStats])
def api_dashboard_stats(db: Session = Depends(get_db)):
    return ok(dashboard_stats(db))


@router.get("/activities/recent", response_model=Envelope[list[Activity]])
def api_recent_activities(
    limit: int = Query(default=DEFAULT_ACTIVITY_LIMIT, ge=1, le=100),
    db: Session = Depends(get_db),
):
    return ok(recent_activities(db, limit))
