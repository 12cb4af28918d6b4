from __future__ import annotations

from typing import Optional

from pydantic import Field

from .common import CamelModel


class CategoryCreate(CamelModel):
    name: str = Field(..., min_length=2, max_length=100)
    description: Optional[str] = Field(default=None, max_length=255)


class CategoryUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=2, max_length=100)
    description: Optional[str] = Field(default=None, max_length=255)


class CategoryOut(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
