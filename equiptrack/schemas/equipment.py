from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from .category import CategoryOut
from .common import CamelModel
from .faculty import FacultyOut
from .history import CurrentStatusOut
from .room import RoomOut


class EquipmentCreate(CamelModel):
    serial_number: str = Field(..., min_length=2, max_length=150)
    name: str = Field(..., min_length=2, max_length=150)
    category_id: int = Field(..., gt=0)
    faculty_id: int = Field(..., gt=0)
    date_purchased: datetime


class EquipmentUpdate(CamelModel):
    serial_number: Optional[str] = Field(default=None, min_length=2, max_length=150)
    name: Optional[str] = Field(default=None, min_length=2, max_length=150)
    category_id: Optional[int] = Field(default=None, gt=0)
    faculty_id: Optional[int] = Field(default=None, gt=0)
    date_purchased: Optional[datetime] = None


class EquipmentOut(CamelModel):
    id: int
    serial_number: str
    name: str
    category_id: int
    faculty_id: int
    date_purchased: str
    created_at: str
    updated_at: str
    category: CategoryOut
    faculty: FacultyOut
    current_status: Optional[CurrentStatusOut] = None
    current_room: Optional[RoomOut] = None


class EquipmentSummary(CamelModel):
    total_equipment: int = 0
    active_equipment: int = 0
    maintenance_count: int = 0
    defective_count: int = 0
    assigned_count: int = 0
    available_count: int = 0
    uncategorized_count: int = 0


class DashboardStats(CamelModel):
    total_equipment: int
    active_equipment: int
    maintenance_count: int


class TimelineEvent(CamelModel):
    id: str
    type: Literal["STATUS", "MAINTENANCE", "LOCATION", "FACULTY"]
    description: str
    created_at: str


class Activity(CamelModel):
    id: str
    description: str
    created_at: str
