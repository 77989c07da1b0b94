# src/cms_backend/schemas/role.py
from __future__ import annotations
from datetime import datetime
from typing import Optional

from cms_backend.schemas.common import CamelModel


class RoleCreate(CamelModel):
    name: str
    intro: Optional[str] = None


class RoleUpdate(CamelModel):
    intro: Optional[str] = None


class RoleOut(CamelModel):
    id: int
    name: str
    intro: Optional[str] = None
    create_at: Optional[datetime] = None
    update_at: Optional[datetime] = None
