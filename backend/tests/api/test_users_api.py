"""Users API — verifies user creation and listing.

Invariants:
    - POST /api/users returns 201 with {_id, username}, username normalized
    - Duplicate usernames (after normalization) → 400 "User already exists"
    - Invalid usernames → 400 with the uniform error envelope
"""

import pytest

from app.db.base import Base


async def test_create_user_returns_201_and_normalized_name(client):
    res = await client.post("/api/users", data={"username": "amy"})
    assert res.status_code == 201
    body = res.json()
    assert body["username"] == "Amy"
    assert len(body["_id"]) == 24


async def test_create_user_normalizes_mixed_case(client):
    res = await client.post("/api/users", data={"username": "jOHN"})
    assert res.json()["username"] == "John"


async def test_create_user_accepts_json_body(client):
    res = await client.post("/api/users", json={"username": "carla"})
    assert res.status_code == 201
    assert res.json()["username"] == "Carla"


async def test_duplicate_username_differing_by_case_returns_400(client):
    await client.post("/api/users", data={"username": "john"})
    res = await client.post("/api/users", data={"username": "JOHN"})
    assert res.status_code == 400
    assert res.json() == {
        "success": False, "status": 400, "message": "User already exists",
    }


@pytest.mark.parametrize("data", [{}, {"username": ""}, {"username": "ab"}])
async def test_invalid_username_returns_400(client, data):
    res = await client.post("/api/users", data=data)
    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert body["message"] == (
        "Invalid username. It must be a string with at least 3 characters."
    )


async def test_non_string_username_in_json_returns_400(client):
    res = await client.post("/api/users", json={"username": 12345})
    assert res.status_code == 400


async def test_malformed_json_returns_400(client):
    res = await client.post(
        "/api/users", content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["success"] is False


async def test_list_users_empty(client):
    res = await client.get("/api/users")
    assert res.status_code == 200
    assert res.json() == []


async def test_list_users_returns_id_and_username(client, create_user):
    amy = await create_user("amy")
    bob = await create_user("bob")

    res = await client.get("/api/users")
    assert res.status_code == 200
    assert res.json() == [
        {"_id": amy["_id"], "username": "Amy"},
        {"_id": bob["_id"], "username": "Bob"},
    ]


async def test_list_users_storage_failure_returns_500(client, test_engine):
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    res = await client.get("/api/users")
    assert res.status_code == 500
    assert res.json() == {
        "success": False,
        "status": 500,
        "message": "Error retrieving users, could not connect to the database.",
    }
