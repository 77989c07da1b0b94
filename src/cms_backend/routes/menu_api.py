# src/cms_backend/routes/menu_api.py
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cms_backend.crud.menu import create_menu, delete_menu, get_menu_by_id, list_menus, update_menu
from cms_backend.schemas.common import IdPath, Pagination
from cms_backend.schemas.menu import MenuCreate, MenuOut, MenuUpdate
from cms_backend.utils.database import get_db
from cms_backend.utils.exceptions import NotFound
from cms_backend.utils.menu_access import get_menu_tree
from cms_backend.utils.response import success

router = APIRouter(prefix="/menu", tags=["Menus"])


@router.post("/tree")
async def api_menu_tree(db: AsyncSession = Depends(get_db)):
    return success(await get_menu_tree(db))


@router.post("/list")
async def api_list_menus(payload: Pagination, db: AsyncSession = Depends(get_db)):
    rows, total = await list_menus(db, payload)
    return success({"list": [MenuOut.model_validate(r) for r in rows], "totalCount": total})


@router.post("")
async def api_create_menu(payload: MenuCreate, db: AsyncSession = Depends(get_db)):
    new_id = await create_menu(db, payload)
    return success({"id": new_id})


@router.patch("/{menu_id}")
async def api_update_menu(menu_id: IdPath, payload: MenuUpdate, db: AsyncSession = Depends(get_db)):
    if not await update_menu(db, menu_id, payload):
        raise NotFound()
    return success({"updated": True})


@router.delete("/{menu_id}")
async def api_delete_menu(menu_id: IdPath, db: AsyncSession = Depends(get_db)):
    if not await delete_menu(db, menu_id):
        raise NotFound()
    return success({"deleted": True})


@router.get("/{menu_id}")
async def api_get_menu(menu_id: IdPath, db: AsyncSession = Depends(get_db)):
    row = await get_menu_by_id(db, menu_id)
    if row is None:
        raise NotFound()
    return success(MenuOut.model_validate(row))
