# src/cms_backend/routes/department_api.py
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cms_backend.crud.department import (
    create_department,
    delete_department,
    get_department_by_id,
    list_departments,
    update_department,
)
from cms_backend.schemas.common import IdPath, Pagination
from cms_backend.schemas.department import DepartmentCreate, DepartmentOut, DepartmentUpdate
from cms_backend.utils.database import get_db
from cms_backend.utils.exceptions import NotFound
from cms_backend.utils.response import success

router = APIRouter(prefix="/department", tags=["Departments"])


@router.post("/list")
async def api_list_departments(payload: Pagination, db: AsyncSession = Depends(get_db)):
    rows, total = await list_departments(db, payload)
    return success({"list": [DepartmentOut.model_validate(r) for r in rows], "totalCount": total})


@router.post("")
async def api_create_department(payload: DepartmentCreate, db: AsyncSession = Depends(get_db)):
    return success({"id": await create_department(db, payload)})


@router.patch("/{department_id}")
async def api_update_department(
    department_id: IdPath,
    payload: DepartmentUpdate,
    db: AsyncSession = Depends(get_db),
):
    if not await update_department(db, department_id, payload):
        raise NotFound()
    return success({"updated": True})


@router.delete("/{department_id}")
async def api_delete_department(department_id: IdPath, db: AsyncSession = Depends(get_db)):
    if not await delete_department(db, department_id):
        raise NotFound()
    return success({"deleted": True})


@router.get("/{department_id}")
async def api_get_department(department_id: IdPath, db: AsyncSession = Depends(get_db)):
    row = await get_department_by_id(db, department_id)
    if row is None:
        raise NotFound()
    return success(DepartmentOut.model_validate(row))
