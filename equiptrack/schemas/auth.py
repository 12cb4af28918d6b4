from __future__ import annotations

from typing import Optional

from pydantic import Field

from .common import CamelModel

# Accepts internal domains such as ``lnu.local``.
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+$"


class AdminLoginRequest(CamelModel):
    email: str = Field(..., min_length=5, max_length=150, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=8, max_length=72)

    model_config = {
        "json_schema_extra": {
            "example": {"email": "admin@lnu.local", "password": "admin12345"}
        },
    }


class FacultyLoginRequest(CamelModel):
    employee_id: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=8, max_length=72)

    model_config = {
        "json_schema_extra": {
            "example": {"employeeId": "EMP-001", "password": "secret-pass"}
        },
    }


class PrincipalOut(CamelModel):
    id: int
    role: str
    name: str
    email: Optional[str] = None
    employee_id: Optional[str] = None
    created_at: str
