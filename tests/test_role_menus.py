import pytest
from sqlalchemy.exc import OperationalError

from cms_backend.crud.menu import create_menu, delete_menu
from cms_backend.crud.role_menus import get_role_menu_ids, set_role_menus
from cms_backend.schemas.menu import MenuCreate
from cms_backend.utils.menu_access import assign_role_menus, get_menu_tree, get_role_menu_tree
from cms_backend.utils.menu_tree import count_nodes


async def _seed(db, *specs):
    """specs: (name, parent_index_or_None, sort); returns the new ids in order."""
    ids = []
    for name, parent, sort in specs:
        parent_id = ids[parent] if parent is not None else None
        ids.append(await create_menu(db, MenuCreate(name=name, type=1, sort=sort, parent_id=parent_id)))
    return ids


async def test_set_then_get_returns_the_set(db_session):
    await set_role_menus(db_session, 1, [3, 1, 2])

    assert await get_role_menu_ids(db_session, 1) == [1, 2, 3]


async def test_set_replaces_previous_links(db_session):
    await set_role_menus(db_session, 1, [1, 2, 3])
    await set_role_menus(db_session, 1, [4])

    assert await get_role_menu_ids(db_session, 1) == [4]


async def test_empty_list_clears_links(db_session):
    await set_role_menus(db_session, 1, [1, 2])
    await set_role_menus(db_session, 1, [])

    assert await get_role_menu_ids(db_session, 1) == []


async def test_set_is_idempotent_and_dedupes(db_session):
    await set_role_menus(db_session, 2, [5, 5, 6])
    first = await get_role_menu_ids(db_session, 2)
    await set_role_menus(db_session, 2, [5, 5, 6])

    assert first == [5, 6]
    assert await get_role_menu_ids(db_session, 2) == first


async def test_other_roles_are_untouched(db_session):
    await set_role_menus(db_session, 1, [1])
    await set_role_menus(db_session, 2, [2])
    await set_role_menus(db_session, 1, [])

    assert await get_role_menu_ids(db_session, 2) == [2]


async def test_failed_insert_rolls_back_to_previous_set(db_session, monkeypatch):
    await set_role_menus(db_session, 1, [1, 2])

    real_execute = db_session.execute

    async def failing_execute(statement, params=None, *args, **kwargs):
        if isinstance(params, list):
            raise OperationalError("INSERT INTO role_menus", {}, Exception("disk I/O error"))
        return await real_execute(statement, params, *args, **kwargs)

    monkeypatch.setattr(db_session, "execute", failing_execute)

    with pytest.raises(OperationalError):
        await set_role_menus(db_session, 1, [7, 8])

    assert await get_role_menu_ids(db_session, 1) == [1, 2]


async def test_unknown_role_has_no_ids_and_empty_tree(db_session):
    await _seed(db_session, ("root", None, 1))

    assert await get_role_menu_ids(db_session, 4242) == []
    assert await get_role_menu_tree(db_session, 4242) == []


async def test_role_tree_is_filtered_to_linked_menus(db_session):
    root, child, other = await _seed(
        db_session,
        ("root", None, 1),
        ("child", 0, 1),
        ("other", None, 2),
    )
    await set_role_menus(db_session, 3, [root, child])

    tree = await get_role_menu_tree(db_session, 3)

    assert [n.id for n in tree] == [root]
    assert [c.id for c in tree[0].children] == [child]
    assert count_nodes(await get_menu_tree(db_session)) == 3
    assert other not in {n.id for n in tree}


async def test_assign_keeps_ids_without_menu_rows(db_session):
    (existing,) = await _seed(db_session, ("ten", None, 1))
    missing = existing + 1000

    ids, tree = await assign_role_menus(db_session, 5, [existing, missing])

    assert ids == sorted([existing, missing])
    assert [n.id for n in tree] == [existing]


async def test_assign_empty_list_clears(db_session):
    (m,) = await _seed(db_session, ("only", None, 1))
    await assign_role_menus(db_session, 5, [m])

    ids, tree = await assign_role_menus(db_session, 5, [])

    assert ids == []
    assert tree == []


async def test_linked_child_of_unlinked_parent_is_dropped(db_session):
    root, child = await _seed(db_session, ("root", None, 1), ("child", 0, 1))

    ids, tree = await assign_role_menus(db_session, 6, [child])

    assert ids == [child]
    assert tree == []


async def test_deleting_parent_orphans_children(db_session):
    root, child = await _seed(db_session, ("root", None, 1), ("child", 0, 1))
    await set_role_menus(db_session, 1, [root, child])

    assert await delete_menu(db_session, root) == 1

    assert await get_menu_tree(db_session) == []
    # links are not cascaded
    assert await get_role_menu_ids(db_session, 1) == [root, child]
