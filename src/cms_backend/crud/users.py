# src/cms_backend/crud/users.py
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple
from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from cms_backend.models.user import User
from cms_backend.schemas.common import Pagination
from cms_backend.schemas.user import UserCreate, UserUpdate
from cms_backend.utils.exceptions import Conflict, InvalidInput
from cms_backend.utils.security import hash_password, verify_password
from cms_backend.utils.timezone import now_local


# -----------------------
# Basic getters / checks
# -----------------------
async def get_user_by_id(db: AsyncSession, user_id: int) -> Optional[User]:
    res = await db.execute(select(User).where(User.id == user_id))
    return res.scalar_one_or_none()


async def get_user_by_name(db: AsyncSession, name: str) -> Optional[User]:
    res = await db.execute(select(User).where(User.name == name))
    return res.scalar_one_or_none()


async def authenticate_user(db: AsyncSession, name: str, password: str) -> Optional[User]:
    """Enabled user whose password matches, else None."""
    user = await get_user_by_name(db, name)
    if not user or user.enable != 1:
        return None
    if not verify_password(password, user.password):
        return None
    return user


async def list_users(db: AsyncSession, pagination: Pagination) -> Tuple[List[User], int]:
    stmt = select(User)
    count_stmt = select(func.count()).select_from(User)
    if pagination.like:
        stmt = stmt.where(User.name.like(pagination.like))
        count_stmt = count_stmt.where(User.name.like(pagination.like))

    res = await db.execute(stmt.order_by(User.id).limit(pagination.size).offset(pagination.offset))
    total = await db.scalar(count_stmt)
    return list(res.scalars().all()), int(total or 0)


# -----------------------
# Writes
# -----------------------
async def create_user(db: AsyncSession, payload: UserCreate) -> int:
    password = payload.password.get_secret_value()
    if not payload.name.strip() or not password.strip():
        raise InvalidInput("name and password are required")

    stmt = (
        insert(User)
        .values(
            name=payload.name,
            realname=payload.realname,
            password=hash_password(password),
            cellphone=payload.cellphone,
            department_id=payload.department_id,
            role_id=payload.role_id,
            enable=1,
        )
        .returning(User.id)
    )
    try:
        res = await db.execute(stmt)
        new_id = res.scalar_one()
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise Conflict(f"user '{payload.name}' already exists")
    return int(new_id)


async def update_user(db: AsyncSession, user_id: int, payload: UserUpdate) -> int:
    values: Dict[str, Any] = {"update_at": now_local()}
    if payload.password is not None:
        values["password"] = hash_password(payload.password.get_secret_value())
    if payload.cellphone is not None:
        values["cellphone"] = payload.cellphone

    res = await db.execute(update(User).where(User.id == user_id).values(**values))
    await db.commit()
    return res.rowcount


async def delete_user(db: AsyncSession, user_id: int) -> int:
    res = await db.execute(delete(User).where(User.id == user_id))
    await db.commit()
    return res.rowcount
