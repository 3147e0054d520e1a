"""Tests for the mentions API endpoints."""

import json

from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from tests.conftest import create_mention, create_message

MERGE_PATCH = {"Content-Type": "application/merge-patch+json"}


async def test_create_and_get_mention(client: AsyncClient):
    resp = await client.post("/api/mentions", json={"user_name": "kris", "text": "@kris look"})
    assert resp.status_code == 201
    created = resp.json()

    resp = await client.get(f"/api/mentions/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"id": created["id"], "user_name": "kris", "text": "@kris look"}


async def test_create_mention_with_id_leaves_store_untouched(client: AsyncClient):
    resp = await client.post("/api/mentions", json={"id": 3, "user_name": "a", "text": "b"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "error.idexists"

    resp = await client.get("/api/mentions")
    assert resp.json() == []


async def test_create_mention_null_field(client: AsyncClient):
    resp = await client.post("/api/mentions", json={"user_name": "a", "text": None})
    assert resp.status_code == 400
    assert resp.json()["error_key"] == "fieldrequired"


async def test_create_mention_wrong_type(client: AsyncClient):
    """Bodies that do not parse are rejected as 400 rather than 422."""
    resp = await client.post("/api/mentions", json={"user_name": ["a"], "text": "b"})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Validation error"


async def test_list_mentions(client: AsyncClient, db: AsyncSession):
    await create_mention(db, user_name="a", text="one")
    await create_mention(db, user_name="b", text="two")
    await db.commit()

    resp = await client.get("/api/mentions")
    assert resp.status_code == 200
    assert [m["text"] for m in resp.json()] == ["one", "two"]


async def test_update_mention_requires_id(client: AsyncClient, db: AsyncSession):
    mention = await create_mention(db)
    await db.commit()

    resp = await client.put(f"/api/mentions/{mention.id}", json={"user_name": "a", "text": "b"})
    assert resp.status_code == 400
    assert resp.json()["error_key"] == "idnull"


async def test_update_mention_missing_field(client: AsyncClient, db: AsyncSession):
    """PUT is a full replacement, so required fields must be present."""
    mention = await create_mention(db)
    await db.commit()

    resp = await client.put(f"/api/mentions/{mention.id}", json={"id": mention.id, "text": "b"})
    assert resp.status_code == 400
    assert resp.json()["error_key"] == "fieldrequired"


async def test_partial_update_mention_merge_patch(client: AsyncClient, db: AsyncSession):
    """PATCH with application/merge-patch+json only touches the supplied fields."""
    mention = await create_mention(db, user_name="a", text="b")
    await db.commit()

    resp = await client.patch(
        f"/api/mentions/{mention.id}",
        content=json.dumps({"id": mention.id, "text": "c"}),
        headers=MERGE_PATCH,
    )
    assert resp.status_code == 200
    assert resp.json() == {"id": mention.id, "user_name": "a", "text": "c"}

    resp = await client.get(f"/api/mentions/{mention.id}")
    assert resp.json()["text"] == "c"


async def test_partial_update_mention_null_is_ignored(client: AsyncClient, db: AsyncSession):
    mention = await create_mention(db, user_name="a", text="b")
    await db.commit()

    resp = await client.patch(
        f"/api/mentions/{mention.id}",
        json={"id": mention.id, "user_name": None, "text": "c"},
    )
    assert resp.status_code == 200
    assert resp.json()["user_name"] == "a"


async def test_partial_update_mention_not_found(client: AsyncClient):
    resp = await client.patch("/api/mentions/55", json={"id": 55, "text": "c"})
    assert resp.status_code == 404


async def test_partial_update_mention_id_mismatch(client: AsyncClient, db: AsyncSession):
    mention = await create_mention(db)
    await db.commit()

    resp = await client.patch(f"/api/mentions/{mention.id}", json={"id": 999, "text": "c"})
    assert resp.status_code == 400
    assert resp.json()["error_key"] == "idinvalid"


async def test_delete_mention_is_idempotent(client: AsyncClient, db: AsyncSession):
    mention = await create_mention(db)
    await db.commit()

    first = await client.delete(f"/api/mentions/{mention.id}")
    second = await client.delete(f"/api/mentions/{mention.id}")
    assert first.status_code == 204
    assert second.status_code == 204


async def test_delete_unknown_mention(client: AsyncClient, db: AsyncSession):
    await create_mention(db)
    await db.commit()

    resp = await client.delete("/api/mentions/4242")
    assert resp.status_code == 204

    resp = await client.get("/api/mentions")
    assert len(resp.json()) == 1


async def test_replace_after_delete_is_not_found(client: AsyncClient, db: AsyncSession):
    mention = await create_mention(db)
    await create_message(db, mention=mention)
    await db.commit()

    await client.delete(f"/api/mentions/{mention.id}")

    resp = await client.put(
        f"/api/mentions/{mention.id}", json={"id": mention.id, "user_name": "a", "text": "b"}
    )
    assert resp.status_code == 404
    resp = await client.patch(f"/api/mentions/{mention.id}", json={"id": mention.id, "text": "b"})
    assert resp.status_code == 404
