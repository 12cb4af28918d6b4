from __future__ import annotations

from typing import Optional

from pydantic import Field

from .common import CamelModel
from .faculty import FacultyRef


class PasswordRequestCreate(CamelModel):
    employee_id: str = Field(..., min_length=3, max_length=50)


class PasswordRequestResolve(CamelModel):
    new_password: str = Field(..., min_length=8, max_length=72)


class AdminRef(CamelModel):
    id: int
    name: str
    email: str


class PasswordRequestOut(CamelModel):
    id: int
    faculty_id: int
    status: str
    requested_at: str
    resolved_at: Optional[str] = None
    resolved_by: Optional[int] = None
    faculty: FacultyRef
    resolved_by_admin: Optional[AdminRef] = None
