"""End-to-end scenarios across the full pipeline and store."""

from httpx import ASGITransport, AsyncClient

from roster.config import Settings
from roster.main import create_app


async def test_create_get_duplicate_delete_scenario(client, auth):
    res = await client.post("/users", json={"username": "alice", "userage": 25}, headers=auth)
    assert res.status_code == 201
    assert res.json()["id"] == 1

    res = await client.get("/users/1", headers=auth)
    assert res.status_code == 200
    assert res.json() == {"id": 1, "username": "alice", "userage": 25}

    res = await client.post("/users", json={"username": "alice", "userage": 25}, headers=auth)
    assert res.status_code == 400

    res = await client.delete("/users/1", headers=auth)
    assert res.status_code == 200

    res = await client.get("/users/1", headers=auth)
    assert res.status_code == 404


async def test_deleted_username_cannot_be_recreated_by_default(client, auth):
    await client.post("/users", json={"username": "alice", "userage": 25}, headers=auth)
    await client.delete("/users/1", headers=auth)
    res = await client.post("/users", json={"username": "alice", "userage": 25}, headers=auth)
    assert res.status_code == 400
    assert res.json() == "Username must be unique."


async def _client_for(settings):
    app = create_app(settings=settings)
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


async def test_reclaim_mode_frees_deleted_username(auth):
    settings = Settings(_env_file=None, reclaim_usernames=True)
    async with await _client_for(settings) as c:
        await c.post("/users", json={"username": "alice", "userage": 25}, headers=auth)
        await c.delete("/users/1", headers=auth)
        res = await c.post("/users", json={"username": "alice", "userage": 25}, headers=auth)
    assert res.status_code == 201
    assert res.json()["id"] == 2


async def test_seeded_app_starts_with_example_users(auth):
    settings = Settings(_env_file=None, seed_example_users=True)
    async with await _client_for(settings) as c:
        res = await c.get("/users", headers=auth)
        created = await c.post("/users", json={"username": "frank", "userage": 50}, headers=auth)
    assert [u["username"] for u in res.json()] == [
        "alice", "bob", "charlie", "diana", "edward",
    ]
    assert created.json()["id"] == 6
    assert created.headers["location"] == "/users/6"


async def test_configured_token_is_the_only_valid_one():
    settings = Settings(_env_file=None, api_token="s3cret")
    async with await _client_for(settings) as c:
        ok = await c.get("/users", headers={"Authorization": "Bearer s3cret"})
        default = await c.get(
            "/users", headers={"Authorization": "Bearer valid-token-example"},
        )
    assert ok.status_code == 200
    assert default.status_code == 401
