from cms_backend.crud.users import get_user_by_name
from cms_backend.utils.security import verify_password


async def test_user_crud_never_exposes_password(client, db_session):
    resp = await client.post(
        "/users",
        json={"name": "coderwhy", "realname": "Why", "password": "123456", "cellphone": "13800000000"},
    )
    user_id = resp.json()["data"]["id"]

    data = (await client.get(f"/users/{user_id}")).json()["data"]
    assert data["name"] == "coderwhy"
    assert data["enable"] == 1
    assert "password" not in data

    stored = await get_user_by_name(db_session, "coderwhy")
    assert stored.password != "123456"
    assert verify_password("123456", stored.password)


async def test_user_patch_rehashes_password(client, db_session):
    resp = await client.post("/users", json={"name": "kobe", "realname": "Kobe", "password": "old"})
    user_id = resp.json()["data"]["id"]

    resp = await client.patch(f"/users/{user_id}", json={"password": "new", "cellphone": "1"})
    assert resp.json()["data"] == {"updated": True}

    stored = await get_user_by_name(db_session, "kobe")
    await db_session.refresh(stored)
    assert verify_password("new", stored.password)
    assert stored.cellphone == "1"


async def test_user_validation_and_conflict(client):
    resp = await client.post("/users", json={"name": "x", "realname": "x", "password": " "})
    assert resp.status_code == 400
    assert resp.json()["message"] == "invalid input: name and password are required"

    await client.post("/users", json={"name": "dup", "realname": "a", "password": "p"})
    resp = await client.post("/users", json={"name": "dup", "realname": "b", "password": "p"})
    assert resp.status_code == 409


async def test_user_list_and_delete(client):
    for name in ("ann", "bob", "annie"):
        await client.post("/users", json={"name": name, "realname": name, "password": "pw"})

    data = (await client.post("/users/list", json={"offset": 0, "size": 10, "name": "ann"})).json()["data"]
    assert data["totalCount"] == 2

    user_id = data["list"][0]["id"]
    assert (await client.delete(f"/users/{user_id}")).json()["data"] == {"deleted": True}
    assert (await client.delete(f"/users/{user_id}")).status_code == 404


async def test_department_crud(client):
    resp = await client.post("/department", json={"name": "R&D", "leader": "lee"})
    parent = resp.json()["data"]["id"]
    resp = await client.post("/department", json={"name": "Frontend", "parentId": parent})
    child = resp.json()["data"]["id"]

    await client.patch(f"/department/{child}", json={"leader": "kim"})
    data = (await client.get(f"/department/{child}")).json()["data"]
    assert data["parentId"] == parent
    assert data["leader"] == "kim"

    listed = (await client.post("/department/list", json={"offset": 0, "size": 100})).json()["data"]
    assert listed["totalCount"] == 2

    assert (await client.delete(f"/department/{parent}")).status_code == 200
    assert (await client.get(f"/department/{parent}")).status_code == 404


async def test_blank_department_name_is_400(client):
    resp = await client.post("/department", json={"name": " "})

    assert resp.status_code == 400
    assert resp.json()["message"] == "invalid input: department name is required"
