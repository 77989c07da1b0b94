# src/cms_backend/utils/menu_tree.py
from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Dict, Iterable, List, Optional

from cms_backend.config import settings
from cms_backend.schemas.menu import MenuTreeNode

logger = logging.getLogger(__name__)


def _sort_key(node: MenuTreeNode) -> int:
    return node.sort if node.sort is not None else 0


def build_menu_tree(menus: Iterable[Any], max_depth: Optional[int] = None) -> List[MenuTreeNode]:
    """
    Builds a forest from flat menu rows (ORM rows, MenuOut models or dicts).

    Rules:
      - roots are the rows whose parent_id is None
      - children are attached by parent_id, in the order they appear in `menus`
      - only the top level is sorted (by sort, None as 0; stable)
      - a row whose parent is not reachable from a root is dropped silently
      - branches deeper than `max_depth` levels are cut (and logged)

    Never raises for well-typed input; the input is not mutated.
    """
    limit = settings.MENU_TREE_MAX_DEPTH if max_depth is None else max_depth

    roots: List[MenuTreeNode] = []
    by_parent: Dict[int, List[MenuTreeNode]] = defaultdict(list)

    for m in menus:
        node = MenuTreeNode.model_validate(m).model_copy(update={"children": []})
        if node.parent_id is None:
            roots.append(node)
        else:
            by_parent[node.parent_id].append(node)

    def attach(node: MenuTreeNode, depth: int) -> MenuTreeNode:
        kids = by_parent.get(node.id)
        if not kids:
            return node
        if depth >= limit:
            logger.warning(
                "menu tree depth limit (%d) reached at menu id=%s; %d child node(s) not attached",
                limit,
                node.id,
                len(kids),
            )
            return node
        # each attached child is its own copy: no subtree is shared between parents
        node.children = [attach(k.model_copy(update={"children": []}), depth + 1) for k in kids]
        return node

    forest = [attach(r, 1) for r in roots]
    forest.sort(key=_sort_key)
    return forest


def count_nodes(forest: Iterable[MenuTreeNode]) -> int:
    """Total number of nodes in a forest, all levels included."""
    stack = list(forest)
    total = 0
    while stack:
        n = stack.pop()
        total += 1
        stack.extend(n.children)
    return total
