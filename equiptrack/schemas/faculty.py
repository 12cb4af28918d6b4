from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator

from ..core.statuses import normalize_faculty_status
from .common import CamelModel


class _FacultyStatusMixin(CamelModel):
    @field_validator("status", mode="before", check_fields=False)
    @classmethod
    def _normalize_status(cls, value):
        if value is None:
            return value
        if not isinstance(value, str):
            raise ValueError("status must be a string")
        return normalize_faculty_status(value)


class FacultyCreate(_FacultyStatusMixin):
    name: str = Field(..., min_length=2, max_length=120)
    employee_id: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=8, max_length=72)
    status: Optional[str] = None
    department: Optional[str] = Field(default=None, max_length=120)


class FacultyUpdate(_FacultyStatusMixin):
    name: Optional[str] = Field(default=None, min_length=2, max_length=120)
    employee_id: Optional[str] = Field(default=None, min_length=3, max_length=50)
    password: Optional[str] = Field(default=None, min_length=8, max_length=72)
    status: Optional[str] = None
    department: Optional[str] = Field(default=None, max_length=120)


class ResetPasswordRequest(CamelModel):
    password: str = Field(..., min_length=8, max_length=72)


class FacultyOut(CamelModel):
    id: int
    name: str
    employee_id: str
    status: str
    department: Optional[str] = None
    created_at: str
    updated_at: str


class FacultyRef(CamelModel):
    id: int
    name: str
    employee_id: str
