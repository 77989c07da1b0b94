# src/cms_backend/crud/menu.py
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from cms_backend.models.security.menu import MENU_TYPES, Menu
from cms_backend.schemas.common import Pagination
from cms_backend.schemas.menu import MenuCreate, MenuUpdate
from cms_backend.utils.exceptions import InvalidInput
from cms_backend.utils.timezone import now_local


def _check_type(menu_type: int) -> None:
    if menu_type not in MENU_TYPES:
        raise InvalidInput("menu type must be 1, 2, or 3")


def _patch_values(data: Any) -> Dict[str, Any]:
    """COALESCE semantics: only non-None fields are written."""
    return {k: v for k, v in data.model_dump(by_alias=False).items() if v is not None}


async def create_menu(db: AsyncSession, data: MenuCreate) -> int:
    if not (data.name or "").strip():
        raise InvalidInput("menu name is required")
    _check_type(data.type)

    stmt = (
        insert(Menu)
        .values(
            name=data.name,
            type=data.type,
            url=data.url,
            icon=data.icon,
            sort=data.sort,
            parent_id=data.parent_id,
        )
        .returning(Menu.id)
    )
    res = await db.execute(stmt)
    new_id = res.scalar_one()
    await db.commit()
    return int(new_id)


async def update_menu(db: AsyncSession, menu_id: int, data: MenuUpdate) -> int:
    """Patch a menu; returns the affected row count (0 => no such menu)."""
    if data.type is not None:
        _check_type(data.type)

    values = _patch_values(data)
    values["update_at"] = now_local()
    res = await db.execute(update(Menu).where(Menu.id == menu_id).values(**values))
    await db.commit()
    return res.rowcount


async def delete_menu(db: AsyncSession, menu_id: int) -> int:
    # no cascade: children keep their parent_id, role links stay in place
    res = await db.execute(delete(Menu).where(Menu.id == menu_id))
    await db.commit()
    return res.rowcount


async def get_menu_by_id(db: AsyncSession, menu_id: int) -> Optional[Menu]:
    res = await db.execute(select(Menu).where(Menu.id == menu_id))
    return res.scalar_one_or_none()


async def get_all_menus(db: AsyncSession) -> List[Menu]:
    # NULL sort is stored as NULL; SQLite/Postgres differ on where NULLs land,
    # so order on COALESCE(sort, 0) like the tree builder does
    res = await db.execute(select(Menu).order_by(func.coalesce(Menu.sort, 0).asc(), Menu.id.asc()))
    return list(res.scalars().all())


async def list_menus(db: AsyncSession, pagination: Pagination) -> Tuple[List[Menu], int]:
    stmt = select(Menu)
    count_stmt = select(func.count()).select_from(Menu)
    if pagination.like:
        stmt = stmt.where(Menu.name.like(pagination.like))
        count_stmt = count_stmt.where(Menu.name.like(pagination.like))

    res = await db.execute(stmt.order_by(Menu.id).limit(pagination.size).offset(pagination.offset))
    total = await db.scalar(count_stmt)
    return list(res.scalars().all()), int(total or 0)
