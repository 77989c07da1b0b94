# src/cms_backend/crud/department.py
from __future__ import annotations

from typing import List, Optional, Tuple
from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from cms_backend.models.org.department import Department
from cms_backend.schemas.common import Pagination
from cms_backend.schemas.department import DepartmentCreate, DepartmentUpdate
from cms_backend.utils.exceptions import InvalidInput
from cms_backend.utils.timezone import now_local


async def get_department_by_id(db: AsyncSession, department_id: int) -> Optional[Department]:
    res = await db.execute(select(Department).where(Department.id == department_id))
    return res.scalar_one_or_none()


async def list_departments(db: AsyncSession, pagination: Pagination) -> Tuple[List[Department], int]:
    stmt = select(Department)
    count_stmt = select(func.count()).select_from(Department)
    if pagination.like:
        stmt = stmt.where(Department.name.like(pagination.like))
        count_stmt = count_stmt.where(Department.name.like(pagination.like))

    page = await db.execute(stmt.order_by(Department.id).limit(pagination.size).offset(pagination.offset))
    total = await db.scalar(count_stmt)
    return list(page.scalars().all()), int(total or 0)


async def create_department(db: AsyncSession, payload: DepartmentCreate) -> int:
    if not (payload.name or "").strip():
        raise InvalidInput("department name is required")
    res = await db.execute(
        insert(Department)
        .values(name=payload.name, parent_id=payload.parent_id, leader=payload.leader)
        .returning(Department.id)
    )
    new_id = res.scalar_one()
    await db.commit()
    return int(new_id)


async def update_department(db: AsyncSession, department_id: int, payload: DepartmentUpdate) -> int:
    values = {k: v for k, v in payload.model_dump().items() if v is not None}
    values["update_at"] = now_local()
    res = await db.execute(update(Department).where(Department.id == department_id).values(**values))
    await db.commit()
    return res.rowcount


async def delete_department(db: AsyncSession, department_id: int) -> int:
    res = await db.execute(delete(Department).where(Department.id == department_id))
    await db.commit()
    return res.rowcount
