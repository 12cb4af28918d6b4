from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..core.errors import DuplicateError
from ..core.security import ROLE_SUPER_ADMIN
from ..crud.users import create_account, get_user, list_users
from ..db.session import get_db
from ..deps.auth import require_admin
from ..schemas.common import Envelope, ok
from ..schemas.user import AdminAccountOut, FacultyAccountOut, UserCreate, UserOut

# Mounted under both /users and /user.
router = APIRouter(tags=["users"], dependencies=[Depends(require_admin)])


@router.post("", response_model=Envelope[AdminAccountOut | FacultyAccountOut], status_code=201)
def api_create_user(payload: UserCreate, db: Session = Depends(get_db)):
    try:
        role, account = create_account(db, payload.model_dump(exclude_unset=True))
    except DuplicateError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    if role == ROLE_SUPER_ADMIN:
        return ok(AdminAccountOut.model_validate(account))
    return ok(FacultyAccountOut.model_validate(account))


@router.get("", response_model=Envelope[list[UserOut]])
def api_list_users(db: Session = Depends(get_db)):
    return ok(list_users(db))


@router.get("/{user_id}", response_model=Envelope[UserOut])
def api_get_user(user_id: int, db: Session = Depends(get_db)):
    user = get_user(db, user_id)
    if not user:
        raise HTTPException(404, "User not found")
    return ok(user)
