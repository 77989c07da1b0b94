# src/cms_backend/crud/role_menus.py
from __future__ import annotations

import logging
from typing import Iterable, List

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cms_backend.models.security.role_menu import RoleMenu

logger = logging.getLogger(__name__)


async def get_role_menu_ids(db: AsyncSession, role_id: int) -> List[int]:
    """Menu ids linked to a role, ascending. Unknown roles simply have none."""
    res = await db.execute(
        select(RoleMenu.menu_id).where(RoleMenu.role_id == role_id).order_by(RoleMenu.menu_id)
    )
    return [int(mid) for mid in res.scalars().all()]


async def set_role_menus(db: AsyncSession, role_id: int, menu_ids: Iterable[int]) -> None:
    """
    Replace the whole link set of a role.

    The delete and the inserts share one transaction: either the new set is
    committed, or the rollback leaves the previous set untouched. Duplicate
    ids collapse to one link. Ids are not checked against the menus table.
    """
    unique_ids = list(dict.fromkeys(int(mid) for mid in menu_ids))

    try:
        await db.execute(delete(RoleMenu).where(RoleMenu.role_id == role_id))
        if unique_ids:
            await db.execute(
                insert(RoleMenu),
                [{"role_id": role_id, "menu_id": mid} for mid in unique_ids],
            )
        await db.commit()
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("set_role_menus rolled back for role_id=%s", role_id)
        raise

    logger.info("role_id=%s now linked to %d menu(s)", role_id, len(unique_ids))
