# src/cms_backend/schemas/department.py
from __future__ import annotations
from datetime import datetime
from typing import Optional

from cms_backend.schemas.common import CamelModel, Int64


class DepartmentCreate(CamelModel):
    name: str
    parent_id: Optional[Int64] = None
    leader: Optional[str] = None


class DepartmentUpdate(CamelModel):
    parent_id: Optional[Int64] = None
    leader: Optional[str] = None


class DepartmentOut(CamelModel):
    id: int
    name: str
    parent_id: Optional[Int64] = None
    leader: Optional[str] = None
    create_at: Optional[datetime] = None
    update_at: Optional[datetime] = None
