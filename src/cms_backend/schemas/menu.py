# src/cms_backend/schemas/menu.py
from __future__ import annotations
from datetime import datetime
from typing import List, Optional

from cms_backend.schemas.common import CamelModel, Int64


class MenuBase(CamelModel):
    url: Optional[str] = None
    icon: Optional[str] = None
    sort: Optional[Int64] = None             # missing sort orders as 0
    parent_id: Optional[Int64] = None        # None => root


class MenuCreate(MenuBase):
    name: str
    type: int                                # 1 directory, 2 menu item, 3 action


class MenuUpdate(MenuBase):
    # COALESCE semantics: None keeps the stored value
    name: Optional[str] = None
    type: Optional[Int64] = None


class MenuOut(MenuBase):
    id: int
    name: str
    type: int
    create_at: Optional[datetime] = None
    update_at: Optional[datetime] = None


class MenuTreeNode(MenuOut):
    children: List[MenuTreeNode] = []


class AssignRoleMenus(CamelModel):
    role_id: Int64
    menu_list: List[Int64]
