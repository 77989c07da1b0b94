# src/cms_backend/crud/role.py
from __future__ import annotations

from typing import List, Optional, Tuple
from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from cms_backend.models.security.role import Role
from cms_backend.schemas.common import Pagination
from cms_backend.schemas.role import RoleCreate, RoleUpdate
from cms_backend.utils.exceptions import Conflict, InvalidInput
from cms_backend.utils.timezone import now_local


async def get_role_by_id(db: AsyncSession, role_id: int) -> Optional[Role]:
    res = await db.execute(select(Role).where(Role.id == role_id))
    return res.scalar_one_or_none()


async def list_roles(db: AsyncSession, pagination: Pagination) -> Tuple[List[Role], int]:
    stmt = select(Role)
    count_stmt = select(func.count()).select_from(Role)
    if pagination.like:
        stmt = stmt.where(Role.name.like(pagination.like))
        count_stmt = count_stmt.where(Role.name.like(pagination.like))

    page = await db.execute(stmt.order_by(Role.id).limit(pagination.size).offset(pagination.offset))
    total = await db.scalar(count_stmt)
    return list(page.scalars().all()), int(total or 0)


async def create_role(db: AsyncSession, payload: RoleCreate) -> int:
    if not (payload.name or "").strip():
        raise InvalidInput("role name is required")
    try:
        res = await db.execute(
            insert(Role).values(name=payload.name, intro=payload.intro).returning(Role.id)
        )
        new_id = res.scalar_one()
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise Conflict(f"role '{payload.name}' already exists")
    return int(new_id)


async def update_role(db: AsyncSession, role_id: int, payload: RoleUpdate) -> int:
    values = {"update_at": now_local()}
    if payload.intro is not None:
        values["intro"] = payload.intro
    res = await db.execute(update(Role).where(Role.id == role_id).values(**values))
    await db.commit()
    return res.rowcount


async def delete_role(db: AsyncSession, role_id: int) -> int:
    # role_menus rows are left as they are, like menu deletes
    res = await db.execute(delete(Role).where(Role.id == role_id))
    await db.commit()
    return res.rowcount
