from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from .auth import EMAIL_PATTERN
from .common import CamelModel


class UserCreate(CamelModel):
    name: str = Field(..., min_length=2, max_length=120)
    password: str = Field(..., min_length=8, max_length=72)
    role: str
    email: Optional[str] = Field(default=None, min_length=5, max_length=150, pattern=EMAIL_PATTERN)
    employee_id: Optional[str] = Field(default=None, min_length=3, max_length=50)


class UserOut(CamelModel):
    id: int
    name: str
    email: str
    role: str
    created_at: str
    updated_at: str


class UserRef(CamelModel):
    id: int
    name: str
    email: str
    role: str
    created_at: str


class AdminAccountOut(UserOut):
    account_type: Literal["SUPER_ADMIN"] = "SUPER_ADMIN"


class FacultyAccountOut(CamelModel):
    account_type: Literal["USER"] = "USER"
    id: int
    name: str
    employee_id: str
    created_at: str
    updated_at: str
