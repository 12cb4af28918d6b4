from __future__ import annotations

from dataclasses import dataclass

from fastapi import Depends, Header, HTTPException, Request, status
from fastapi.security.utils import get_authorization_scheme_param
from sqlalchemy.orm import Session

from ..core.security import ROLE_SUPER_ADMIN, ROLE_USER, decode_token
from ..db.session import get_db
from ..models.faculty import Faculty
from ..models.user import User


@dataclass
class Principal:
    """The authenticated caller, resolved from a bearer token."""

    id: int
    role: str
    name: str
    created_at: str
    email: str | None = None
    employee_id: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_SUPER_ADMIN

    @property
    def label(self) -> str:
        return f"{'admin' if self.is_admin else 'faculty'}:{self.id}"


def _unauthorized(detail: str = "Unauthorized") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _set_principal(request: Request, principal: Principal) -> None:
    request.state.principal = principal.label


def _resolve_subject(db: Session, role: str, subject_id: int) -> Principal | None:
    if role == ROLE_SUPER_ADMIN:
        user = db.get(User, subject_id)
        if user is None:
            return None
        return Principal(
            id=user.id,
            role=ROLE_SUPER_ADMIN,
            name=user.name,
            email=user.email,
            created_at=user.created_at,
        )
    if role == ROLE_USER:
        faculty = db.get(Faculty, subject_id)
        if faculty is None:
            return None
        return Principal(
            id=faculty.id,
            role=ROLE_USER,
            name=faculty.name,
            employee_id=faculty.employee_id,
            created_at=faculty.created_at,
        )
    return None


def require_user(
    request: Request,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db),
) -> Principal:
    if not authorization:
        raise _unauthorized("Authorization required")
    scheme, credentials = get_authorization_scheme_param(authorization)
    if scheme.lower() != "bearer" or not credentials:
        raise _unauthorized("Bearer token required")
    try:
        payload = decode_token(credentials)
    except ValueError as exc:
        raise _unauthorized(str(exc)) from exc
    principal = _resolve_subject(db, payload.role, payload.subject_id)
    if principal is None:
        raise _unauthorized("Invalid token")
    _set_principal(request, principal)
    return principal


def require_admin(principal: Principal = Depends(require_user)) -> Principal:
    if not principal.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Administrator access required")
    return principal
