from __future__ import annotations

from typing import Optional

from pydantic import Field

from .common import CamelModel


class RoomCreate(CamelModel):
    name: str = Field(..., min_length=2, max_length=100)
    building: Optional[str] = Field(default=None, max_length=100)
    floor: Optional[str] = Field(default=None, max_length=50)


class RoomUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=2, max_length=100)
    building: Optional[str] = Field(default=None, max_length=100)
    floor: Optional[str] = Field(default=None, max_length=50)


class RoomOut(CamelModel):
    id: int
    name: str
    building: Optional[str] = None
    floor: Optional[str] = None
