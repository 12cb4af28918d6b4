from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..core.security import (
    ROLE_SUPER_ADMIN,
    ROLE_USER,
    AccessToken,
    issue_access_token,
    verify_password,
)
from ..core.statuses import FACULTY_INACTIVE
from ..crud.faculty import get_faculty_by_employee_id
from ..crud.users import get_user_by_email
from ..db.session import get_db
from ..deps.auth import Principal, require_user
from ..schemas.auth import AdminLoginRequest, FacultyLoginRequest, PrincipalOut
from ..schemas.common import Envelope, ok

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


def _invalid_credentials() -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")


@router.post("/login/admin", response_model=AccessToken, summary="Administrator login")
def login_admin(payload: AdminLoginRequest, db: Session = Depends(get_db)):
    user = get_user_by_email(db, payload.email)
    if user is None or not verify_password(payload.password, user.password_hash):
        logger.warning("auth.login_failed", extra={"extra_data": {"kind": "admin"}})
        raise _invalid_credentials()
    token = issue_access_token(user.id, ROLE_SUPER_ADMIN, name=user.name, email=user.email)
    return token


@router.post("/login/faculty", response_model=AccessToken, summary="Faculty login")
def login_faculty(payload: FacultyLoginRequest, db: Session = Depends(get_db)):
    faculty = get_faculty_by_employee_id(db, payload.employee_id)
    if faculty is None or not verify_password(payload.password, faculty.password_hash):
        logger.warning("auth.login_failed", extra={"extra_data": {"kind": "faculty"}})
        raise _invalid_credentials()
    if faculty.status == FACULTY_INACTIVE:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Account is inactive")
    token = issue_access_token(faculty.id, ROLE_USER, name=faculty.name, employeeId=faculty.employee_id)
    return token


@router.get("/me", response_model=Envelope[PrincipalOut])
def me(principal: Principal = Depends(require_user)):
    return ok(principal)
