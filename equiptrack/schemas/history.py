from __future__ import annotations

from typing import Optional

from pydantic import Field

from .common import CamelModel
from .room import RoomOut
from .user import UserRef


class StatusCreate(CamelModel):
    equipment_id: int = Field(..., gt=0)
    status: str = Field(..., min_length=1, max_length=100)
    changed_by_id: Optional[int] = Field(default=None, gt=0)
    notes: Optional[str] = Field(default=None, max_length=255)


class StatusEntryOut(CamelModel):
    id: int
    equipment_id: int
    status: str
    notes: Optional[str] = None
    changed_by_id: Optional[int] = None
    changed_by: Optional[UserRef] = None
    changed_at: str


class LocationCreate(CamelModel):
    equipment_id: int = Field(..., gt=0)
    room_id: int = Field(..., gt=0)
    assigned_by_id: Optional[int] = Field(default=None, gt=0)


class LocationEntryOut(CamelModel):
    id: int
    equipment_id: int
    room_id: int
    room: RoomOut
    assigned_by_id: Optional[int] = None
    assigned_by: Optional[UserRef] = None
    assigned_at: str


class CurrentStatusOut(CamelModel):
    id: int
    status: str
    notes: Optional[str] = None
    changed_at: str
