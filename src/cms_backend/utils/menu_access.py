# src/cms_backend/utils/menu_access.py
from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from cms_backend.crud.menu import get_all_menus
from cms_backend.crud.role_menus import get_role_menu_ids, set_role_menus
from cms_backend.schemas.menu import MenuTreeNode
from cms_backend.utils.menu_tree import build_menu_tree, count_nodes

logger = logging.getLogger(__name__)


async def get_menu_tree(db: AsyncSession) -> List[MenuTreeNode]:
    """Full, unfiltered tree over every stored menu."""
    menus = await get_all_menus(db)
    return build_menu_tree(menus)


async def _tree_for_ids(db: AsyncSession, menu_ids: Iterable[int]) -> List[MenuTreeNode]:
    wanted = set(menu_ids)
    menus = [m for m in await get_all_menus(db) if m.id in wanted]
    return build_menu_tree(menus)


async def get_role_menu_tree(db: AsyncSession, role_id: int) -> List[MenuTreeNode]:
    """
    Tree restricted to the menus linked to `role_id`.

    A role with no links (including a role that does not exist) gets an
    empty forest without touching the menus table.
    """
    menu_ids = await get_role_menu_ids(db, role_id)
    if not menu_ids:
        return []
    return await _tree_for_ids(db, menu_ids)


async def assign_role_menus(
    db: AsyncSession,
    role_id: int,
    menu_ids: Iterable[int],
) -> Tuple[List[int], List[MenuTreeNode]]:
    """
    Replace the role's menu set, then confirm from storage.

    Returns (linked ids as stored, tree of the linked menus that exist).
    Ids without a menu row stay linked but are absent from the tree.
    """
    await set_role_menus(db, role_id, menu_ids)

    confirmed = await get_role_menu_ids(db, role_id)
    tree = await _tree_for_ids(db, confirmed) if confirmed else []
    logger.debug(
        "assign_role_menus role_id=%s ids=%d tree_nodes=%d",
        role_id,
        len(confirmed),
        count_nodes(tree),
    )
    return confirmed, tree
