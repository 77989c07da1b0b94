# src/cms_backend/routes/role_api.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cms_backend.crud.role import create_role, delete_role, get_role_by_id, list_roles, update_role
from cms_backend.crud.role_menus import get_role_menu_ids
from cms_backend.schemas.common import IdPath, Pagination
from cms_backend.schemas.menu import AssignRoleMenus
from cms_backend.schemas.role import RoleCreate, RoleOut, RoleUpdate
from cms_backend.utils.database import get_db
from cms_backend.utils.exceptions import NotFound
from cms_backend.utils.menu_access import assign_role_menus, get_role_menu_tree
from cms_backend.utils.response import success

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/role", tags=["Roles"])


# -----------------------
# Role <-> menu links
# -----------------------
@router.get("/{role_id}/menu")
async def api_role_menu_tree(role_id: IdPath, db: AsyncSession = Depends(get_db)):
    return success(await get_role_menu_tree(db, role_id))


@router.get("/{role_id}/menuIds")
async def api_role_menu_ids(role_id: IdPath, db: AsyncSession = Depends(get_db)):
    return success({"menuIds": await get_role_menu_ids(db, role_id)})


@router.post("/assign")
async def api_assign_role_menus(payload: AssignRoleMenus, db: AsyncSession = Depends(get_db)):
    menu_ids, tree = await assign_role_menus(db, payload.role_id, payload.menu_list)
    logger.info("role %s assigned menus %s", payload.role_id, menu_ids)
    return success({"menuIds": menu_ids, "tree": tree})


# -----------------------
# Role CRUD
# -----------------------
@router.post("/list")
async def api_list_roles(payload: Pagination, db: AsyncSession = Depends(get_db)):
    rows, total = await list_roles(db, payload)
    return success({"list": [RoleOut.model_validate(r) for r in rows], "totalCount": total})


@router.post("")
async def api_create_role(payload: RoleCreate, db: AsyncSession = Depends(get_db)):
    return success({"id": await create_role(db, payload)})


@router.patch("/{role_id}")
async def api_update_role(role_id: IdPath, payload: RoleUpdate, db: AsyncSession = Depends(get_db)):
    if not await update_role(db, role_id, payload):
        raise NotFound()
    return success({"updated": True})


@router.delete("/{role_id}")
async def api_delete_role(role_id: IdPath, db: AsyncSession = Depends(get_db)):
    if not await delete_role(db, role_id):
        raise NotFound()
    return success({"deleted": True})


@router.get("/{role_id}")
async def api_get_role(role_id: IdPath, db: AsyncSession = Depends(get_db)):
    row = await get_role_by_id(db, role_id)
    if row is None:
        raise NotFound()
    return success(RoleOut.model_validate(row))
