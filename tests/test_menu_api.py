from datetime import datetime


async def _create(client, **body):
    body.setdefault("type", 1)
    resp = await client.post("/menu", json=body)
    assert resp.status_code == 200, resp.text
    return resp.json()["data"]["id"]


async def test_create_and_get_menu(client):
    menu_id = await _create(client, name="System", sort=1, icon="el-icon-setting")

    resp = await client.get(f"/menu/{menu_id}")

    body = resp.json()
    assert resp.status_code == 200
    assert body["code"] == 200
    assert body["message"] == "成功"
    assert body["data"]["name"] == "System"
    assert body["data"]["parentId"] is None
    assert body["data"]["icon"] == "el-icon-setting"


async def test_menu_tree_endpoint(client):
    b = await _create(client, name="B", sort=2)
    a = await _create(client, name="A", sort=1)
    c = await _create(client, name="B-child", sort=1, parentId=b)

    resp = await client.post("/menu/tree", json={})

    data = resp.json()["data"]
    assert [n["id"] for n in data] == [a, b]
    assert data[0]["children"] == []
    assert [n["id"] for n in data[1]["children"]] == [c]


async def test_patch_keeps_unset_fields(client):
    menu_id = await _create(client, name="Users", url="/system/users", sort=3)

    resp = await client.patch(f"/menu/{menu_id}", json={"name": "Accounts"})
    assert resp.json()["data"] == {"updated": True}

    data = (await client.get(f"/menu/{menu_id}")).json()["data"]
    assert data["name"] == "Accounts"
    assert data["url"] == "/system/users"
    assert data["sort"] == 3


async def test_delete_then_get_is_404(client):
    menu_id = await _create(client, name="tmp")

    resp = await client.delete(f"/menu/{menu_id}")
    assert resp.json()["data"] == {"deleted": True}

    resp = await client.get(f"/menu/{menu_id}")
    assert resp.status_code == 404
    assert resp.json() == {"code": 404, "message": "not found", "data": None}


async def test_missing_rows_are_404(client):
    assert (await client.patch("/menu/999", json={"name": "x"})).status_code == 404
    assert (await client.delete("/menu/999")).status_code == 404


async def test_invalid_type_is_400(client):
    resp = await client.post("/menu", json={"name": "bad", "type": 4})

    assert resp.status_code == 400
    assert resp.json()["message"] == "invalid input: menu type must be 1, 2, or 3"
    assert resp.json()["data"] is None


async def test_patch_invalid_type_is_400(client):
    menu_id = await _create(client, name="Reports", type=2)

    resp = await client.patch(f"/menu/{menu_id}", json={"type": 9})

    assert resp.status_code == 400
    assert resp.json()["message"] == "invalid input: menu type must be 1, 2, or 3"
    data = (await client.get(f"/menu/{menu_id}")).json()["data"]
    assert data["type"] == 2


async def test_blank_name_is_400(client):
    resp = await client.post("/menu", json={"name": "  ", "type": 1})

    assert resp.status_code == 400
    assert resp.json()["message"] == "invalid input: menu name is required"


async def test_malformed_body_is_400(client):
    resp = await client.post("/menu", json={"type": 1})

    assert resp.status_code == 400
    assert resp.json()["code"] == 400


async def test_list_pagination_and_filter(client):
    for name in ("alpha", "beta", "alphabet"):
        await _create(client, name=name)

    resp = await client.post("/menu/list", json={"offset": 0, "size": 10, "name": "alpha"})
    data = resp.json()["data"]
    assert data["totalCount"] == 2
    assert {m["name"] for m in data["list"]} == {"alpha", "alphabet"}

    resp = await client.post("/menu/list", json={"offset": 1, "size": 1})
    data = resp.json()["data"]
    assert data["totalCount"] == 3
    assert [m["name"] for m in data["list"]] == ["beta"]


async def test_list_bounds(client):
    resp = await client.post("/menu/list", json={"offset": 0, "size": 0})
    assert resp.status_code == 400
    assert resp.json()["message"] == "invalid input: size must be between 1 and 100"

    resp = await client.post("/menu/list", json={"offset": -1, "size": 10})
    assert resp.status_code == 400
    assert resp.json()["message"] == "invalid input: offset must be >= 0"


async def test_unknown_route_is_404_envelope(client):
    resp = await client.get("/nope")

    assert resp.status_code == 404
    assert resp.json()["code"] == 404


async def test_timestamps_keep_their_offset(client):
    menu_id = await _create(client, name="Dashboard")
    await client.patch(f"/menu/{menu_id}", json={"sort": 4})

    data = (await client.get(f"/menu/{menu_id}")).json()["data"]

    assert datetime.fromisoformat(data["createAt"]).tzinfo is not None
    assert datetime.fromisoformat(data["updateAt"]).tzinfo is not None


async def test_ids_outside_int64_are_400(client):
    too_big = 2**63

    for resp in (
        await client.get(f"/menu/{too_big}"),
        await client.patch(f"/menu/{too_big}", json={"name": "x"}),
        await client.delete("/menu/18446744073709551616"),
        await client.post("/menu", json={"name": "x", "type": 1, "parentId": too_big}),
        await client.post("/menu/list", json={"offset": too_big, "size": 10}),
    ):
        assert resp.status_code == 400
        assert resp.json()["code"] == 400
