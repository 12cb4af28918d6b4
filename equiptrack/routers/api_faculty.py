from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..crud.faculty import (
    create_faculty,
    delete_faculty,
    get_faculty,
    list_faculty,
    set_faculty_password,
    update_faculty,
)
from ..db.session import get_db
from ..deps.auth import require_user
from ..schemas.common import Envelope, ok
from ..schemas.faculty import FacultyCreate, FacultyOut, FacultyUpdate, ResetPasswordRequest

# Mounted under both /faculty and /faculties.
router = APIRouter(tags=["faculty"], dependencies=[Depends(require_user)])


def _get_or_404(db: Session, faculty_id: int):
    faculty = get_faculty(db, faculty_id)
    if not faculty:
        raise HTTPException(404, f"Faculty with ID {faculty_id} not found")
    return faculty


@router.post("", response_model=Envelope[FacultyOut], status_code=201)
def api_create_faculty(payload: FacultyCreate, db: Session = Depends(get_db)):
    try:
        return ok(create_faculty(db, payload.model_dump(exclude_unset=True)))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.get("", response_model=Envelope[list[FacultyOut]])
def api_list_faculty(db: Session = Depends(get_db)):
    return ok(list_faculty(db))


@router.get("/{faculty_id}", response_model=Envelope[FacultyOut])
def api_get_faculty(faculty_id: int, db: Session = Depends(get_db)):
    return ok(_get_or_404(db, faculty_id))


@router.patch("/{faculty_id}/reset-password", response_model=Envelope[FacultyOut])
def api_reset_faculty_password(faculty_id: int, payload: ResetPasswordRequest, db: Session = Depends(get_db)):
    faculty = _get_or_404(db, faculty_id)
    return ok(set_faculty_password(db, faculty, payload.password))


@router.api_route("/{faculty_id}", methods=["PATCH", "PUT"], response_model=Envelope[FacultyOut])
def api_update_faculty(faculty_id: int, payload: FacultyUpdate, db: Session = Depends(get_db)):
    faculty = _get_or_404(db, faculty_id)
    try:
        return ok(update_faculty(db, faculty, payload.model_dump(exclude_unset=True)))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.delete("/{faculty_id}", response_model=Envelope[FacultyOut])
def api_delete_faculty(faculty_id: int, db: Session = Depends(get_db)):
    faculty = _get_or_404(db, faculty_id)
    snapshot = FacultyOut.model_validate(faculty)
    try:
        delete_faculty(db, faculty)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return ok(snapshot)
