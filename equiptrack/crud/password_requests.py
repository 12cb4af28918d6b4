"""Password reset requests raised by faculty and resolved by administrators."""

from __future__ import annotations

import logging

from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from ..core.statuses import RESET_COMPLETED, RESET_PENDING
from ..core.timestamps import utcnow_iso
from ..models.password_request import PasswordResetRequest
from .faculty import get_faculty_by_employee_id, set_faculty_password

logger = logging.getLogger(__name__)

ACKNOWLEDGEMENT = "If an account exists, a request has been submitted"


class RequestAlreadyResolved(ValueError):
    """The request is no longer pending."""


def submit_request(db: Session, employee_id: str) -> PasswordResetRequest | None:
    """Open a pending request for ``employee_id`` if the account exists.

    At most one pending request is kept per faculty member. Returns the
    pending request, or ``None`` when no such account exists; callers must not
    reveal which case occurred.
    """

    faculty = get_faculty_by_employee_id(db, employee_id)
    if faculty is None:
        return None
    stmt = select(PasswordResetRequest).where(
        PasswordResetRequest.faculty_id == faculty.id,
        PasswordResetRequest.status == RESET_PENDING,
    )
    pending = db.execute(stmt).unique().scalars().first()
    if pending is not None:
        return pending
    request = PasswordResetRequest(
        faculty_id=faculty.id,
        status=RESET_PENDING,
        requested_at=utcnow_iso(),
    )
    db.add(request)
    db.commit()
    db.refresh(request)
    logger.info(
        "password_request.submitted",
        extra={"extra_data": {"request_id": request.id, "employee_id": faculty.employee_id}},
    )
    return request


def list_requests(db: Session) -> list[PasswordResetRequest]:
    stmt = select(PasswordResetRequest).order_by(
        desc(PasswordResetRequest.requested_at), desc(PasswordResetRequest.id)
    )
    return db.execute(stmt).unique().scalars().all()


def get_request(db: Session, request_id: int) -> PasswordResetRequest | None:
    return db.get(PasswordResetRequest, request_id)


def resolve_request(
    db: Session,
    request: PasswordResetRequest,
    *,
    new_password: str,
    admin_id: int,
) -> PasswordResetRequest:
    """Set the faculty password and close the request in one transaction."""

    if request.status != RESET_PENDING:
        raise RequestAlreadyResolved("Password reset request is already completed")
    try:
        set_faculty_password(db, request.faculty, new_password, commit=False)
        request.status = RESET_COMPLETED
        request.resolved_at = utcnow_iso()
        request.resolved_by = admin_id
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(request)
    logger.info(
        "password_request.resolved",
        extra={
            "extra_data": {
                "request_id": request.id,
                "admin_id": admin_id,
                "employee_id": request.faculty.employee_id,
            }
        },
    )
    return request
