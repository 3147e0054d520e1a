"""Tests for the user-profiles API endpoints."""

from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from tests.conftest import create_message, create_user_profile


async def test_create_user_profile_minimal(client: AsyncClient):
    """display_name is optional."""
    resp = await client.post("/api/user-profiles", json={"user_name": "alice"})
    assert resp.status_code == 201
    data = resp.json()
    assert data["user_name"] == "alice"
    assert data["display_name"] is None
    assert resp.headers["location"] == f"/api/user-profiles/{data['id']}"
    assert resp.headers["x-zipslackapp-alert"].startswith("A new userProfile is created")


async def test_replace_user_profile_clears_optional_field(client: AsyncClient, db: AsyncSession):
    profile = await create_user_profile(db, user_name="bob", display_name="Bob")
    await db.commit()

    resp = await client.put(
        f"/api/user-profiles/{profile.id}", json={"id": profile.id, "user_name": "bob"}
    )
    assert resp.status_code == 200
    assert resp.json()["display_name"] is None


async def test_patch_user_profile_keeps_optional_field(client: AsyncClient, db: AsyncSession):
    profile = await create_user_profile(db, user_name="bob", display_name="Bob")
    await db.commit()

    resp = await client.patch(
        f"/api/user-profiles/{profile.id}", json={"id": profile.id, "user_name": "bobby"}
    )
    assert resp.status_code == 200
    assert resp.json() == {"id": profile.id, "user_name": "bobby", "display_name": "Bob"}


async def test_get_user_profile_not_found(client: AsyncClient):
    resp = await client.get("/api/user-profiles/31337")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "UserProfile not found"


async def test_delete_user_profile_detaches_sent_messages(client: AsyncClient, db: AsyncSession):
    profile = await create_user_profile(db)
    message = await create_message(db, sender=profile)
    await db.commit()

    resp = await client.delete(f"/api/user-profiles/{profile.id}")
    assert resp.status_code == 204

    resp = await client.get(f"/api/messages/{message.id}")
    assert resp.status_code == 200
    assert resp.json()["sender"] is None
