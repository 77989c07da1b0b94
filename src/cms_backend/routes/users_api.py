# src/cms_backend/routes/users_api.py
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cms_backend.crud.users import create_user, delete_user, get_user_by_id, list_users, update_user
from cms_backend.schemas.common import IdPath, Pagination
from cms_backend.schemas.user import UserCreate, UserOut, UserUpdate
from cms_backend.utils.database import get_db
from cms_backend.utils.exceptions import NotFound
from cms_backend.utils.response import success

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("/list")
async def api_list_users(payload: Pagination, db: AsyncSession = Depends(get_db)):
    rows, total = await list_users(db, payload)
    return success({"list": [UserOut.model_validate(r) for r in rows], "totalCount": total})


@router.post("")
async def api_create_user(payload: UserCreate, db: AsyncSession = Depends(get_db)):
    # password is hashed inside create_user
    return success({"id": await create_user(db, payload)})


@router.patch("/{user_id}")
async def api_update_user(user_id: IdPath, payload: UserUpdate, db: AsyncSession = Depends(get_db)):
    if not await update_user(db, user_id, payload):
        raise NotFound()
    return success({"updated": True})


@router.delete("/{user_id}")
async def api_delete_user(user_id: IdPath, db: AsyncSession = Depends(get_db)):
    if not await delete_user(db, user_id):
        raise NotFound()
    return success({"deleted": True})


@router.get("/{user_id}")
async def api_get_user(user_id: IdPath, db: AsyncSession = Depends(get_db)):
    row = await get_user_by_id(db, user_id)
    if row is None:
        raise NotFound()
    return success(UserOut.model_validate(row))
