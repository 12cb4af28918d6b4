from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..crud.password_requests import (
    ACKNOWLEDGEMENT,
    RequestAlreadyResolved,
    get_request,
    list_requests,
    resolve_request,
    submit_request,
)
from ..db.session import get_db
from ..deps.auth import Principal, require_admin
from ..schemas.common import Envelope, MessageOut, ok
from ..schemas.password_request import (
    PasswordRequestCreate,
    PasswordRequestOut,
    PasswordRequestResolve,
)

router = APIRouter(prefix="/password-requests", tags=["password-requests"])


@router.post("", response_model=MessageOut)
def api_submit_password_request(payload: PasswordRequestCreate, db: Session = Depends(get_db)):
    # Same answer whether or not the account exists.
    submit_request(db, payload.employee_id)
    return MessageOut(message=ACKNOWLEDGEMENT)


@router.get(
    "",
    response_model=Envelope[list[PasswordRequestOut]],
    dependencies=[Depends(require_admin)],
)
def api_list_password_requests(db: Session = Depends(get_db)):
    return ok(list_requests(db))


@router.post("/{request_id}/resolve", response_model=Envelope[PasswordRequestOut])
def api_resolve_password_request(
    request_id: int,
    payload: PasswordRequestResolve,
    admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
):
    request = get_request(db, request_id)
    if request is None:
        raise HTTPException(404, "Password reset request not found")
    try:
        resolved = resolve_request(db, request, new_password=payload.new_password, admin_id=admin.id)
    except RequestAlreadyResolved as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return ok(resolved)
