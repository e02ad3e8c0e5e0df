from datetime import datetime

import pytest

pytestmark = pytest.mark.anyio


def _ts(value):
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


async def test_create_and_get_user(client):
    res = await client.post("/users", json={"name": "Alice"})
    assert res.status_code == 201
    data = res.json()
    assert data["name"] == "Alice"
    assert set(data) == {"id", "name", "createdAt", "updatedAt"}
    uid = data["id"]

    # get
    res = await client.get(f"/users/{uid}")
    assert res.status_code == 200
    assert res.json() == data


async def test_create_user_trailing_slash(client):
    res = await client.post("/users/", json={"name": "Slash"})
    assert res.status_code == 201


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"name": ""},
        {"name": 42},
        {"name": None},
        {"name": "Alice", "email": "alice@example.com"},
    ],
)
async def test_create_user_rejects_invalid_body(client, payload):
    res = await client.post("/users", json=payload)
    assert res.status_code == 400
    assert isinstance(res.json()["detail"], list)

    res = await client.get("/users")
    assert res.json() == []


async def test_list_users_newest_first(client, create_user):
    first = await create_user("First")
    second = await create_user("Second")

    res = await client.get("/users")
    assert res.status_code == 200
    assert [u["id"] for u in res.json()] == [second["id"], first["id"]]
    assert all("todos" not in u for u in res.json())


async def test_list_users_include_todos(client, create_user, create_todo):
    user = await create_user()
    todo = await create_todo(user["id"])
    other = await create_user("Bob")

    res = await client.get("/users", params={"includeTodos": "true"})
    assert res.status_code == 200
    by_id = {u["id"]: u for u in res.json()}
    assert [t["id"] for t in by_id[user["id"]]["todos"]] == [todo["id"]]
    assert by_id[other["id"]]["todos"] == []
    assert "user" not in by_id[user["id"]]["todos"][0]


async def test_get_user_include_todos(client, create_user, create_todo):
    user = await create_user()
    await create_todo(user["id"], title="one")
    await create_todo(user["id"], title="two")

    res = await client.get(f"/users/{user['id']}", params={"includeTodos": "true"})
    assert res.status_code == 200
    assert [t["title"] for t in res.json()["todos"]] == ["one", "two"]

    res = await client.get(f"/users/{user['id']}")
    assert "todos" not in res.json()


async def test_get_missing_user(client):
    res = await client.get("/users/999")
    assert res.status_code == 404
    assert res.json() == {"detail": "User with ID 999 not found"}


@pytest.mark.parametrize("raw_id", ["abc", "1.5", "1.0", "+1", "%201", "1e0", "0x1"])
async def test_non_integer_id_is_rejected(client, create_user, raw_id):
    user = await create_user("Ann")
    assert user["id"] == 1

    for method in ("GET", "PATCH", "DELETE"):
        kwargs = {"json": {"name": "Changed"}} if method == "PATCH" else {}
        res = await client.request(method, f"/users/{raw_id}", **kwargs)
        assert res.status_code == 400

    # the row is untouched
    res = await client.get("/users/1")
    assert res.json() == user


async def test_negative_id_is_not_found(client):
    res = await client.get("/users/-1")
    assert res.status_code == 404


async def test_id_beyond_storage_range_is_rejected(client):
    res = await client.get(f"/users/{10**20}")
    assert res.status_code == 400

    res = await client.delete(f"/users/{-(10**20)}")
    assert res.status_code == 400


@pytest.mark.parametrize("raw", ["maybe", "1", "0", "yes", "True"])
async def test_malformed_bool_query_is_rejected(client, raw):
    res = await client.get("/users", params={"includeTodos": raw})
    assert res.status_code == 400


async def test_bool_query_accepts_true_and_false(client, create_user):
    await create_user()

    res = await client.get("/users", params={"includeTodos": "true"})
    assert res.json()[0]["todos"] == []

    res = await client.get("/users", params={"includeTodos": "false"})
    assert "todos" not in res.json()[0]


async def test_update_user(client, create_user):
    user = await create_user("Ann")

    res = await client.patch(f"/users/{user['id']}", json={"name": "Anne"})
    assert res.status_code == 200
    data = res.json()
    assert data["name"] == "Anne"
    assert data["createdAt"] == user["createdAt"]
    assert _ts(data["updatedAt"]) >= _ts(user["updatedAt"])


async def test_empty_patch_refreshes_updated_at(client, create_user):
    user = await create_user("Ann")

    res = await client.patch(f"/users/{user['id']}", json={})
    assert res.status_code == 200
    assert res.json()["name"] == "Ann"
    assert _ts(res.json()["updatedAt"]) > _ts(user["updatedAt"])


@pytest.mark.parametrize("payload", [{"name": ""}, {"name": None}, {"id": 5}, {"createdAt": "2020-01-01T00:00:00Z"}])
async def test_update_user_rejects_invalid_body(client, create_user, payload):
    user = await create_user("Ann")

    res = await client.patch(f"/users/{user['id']}", json=payload)
    assert res.status_code == 400

    res = await client.get(f"/users/{user['id']}")
    assert res.json() == user


async def test_update_missing_user(client):
    res = await client.patch("/users/999", json={"name": "Ghost"})
    assert res.status_code == 404


async def test_delete_user_returns_snapshot(client, create_user):
    user = await create_user("Ann")

    res = await client.delete(f"/users/{user['id']}")
    assert res.status_code == 200
    assert res.json() == user

    res = await client.get(f"/users/{user['id']}")
    assert res.status_code == 404

    res = await client.delete(f"/users/{user['id']}")
    assert res.status_code == 404


async def test_delete_user_cascades_to_todos(client, create_user, create_todo):
    user = await create_user("Ann")
    keeper = await create_user("Bob")
    todo_ids = [(await create_todo(user["id"], title=f"t{i}"))["id"] for i in range(3)]
    kept = await create_todo(keeper["id"])

    res = await client.delete(f"/users/{user['id']}")
    assert res.status_code == 200

    for todo_id in todo_ids:
        res = await client.get(f"/todos/{todo_id}")
        assert res.status_code == 404

    res = await client.get("/todos")
    assert [t["id"] for t in res.json()] == [kept["id"]]
