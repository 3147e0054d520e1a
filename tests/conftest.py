"""Shared fixtures: an in-memory database, an API client bound to it, and factories."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from zipslack.app.db import Base, get_db, install_sqlite_pragmas
from zipslack.app.main import app
from zipslack.app.models.channel import Channel
from zipslack.app.models.mention import Mention
from zipslack.app.models.message import Message
from zipslack.app.models.user_profile import UserProfile
from zipslack.app.models.workspace import Workspace


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    install_sqlite_pragmas(test_engine)
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient, None]:
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


async def create_workspace(
    db: AsyncSession, name: str = "zipcode", description: str = "Zip Code Wilmington"
) -> Workspace:
    workspace = Workspace(name=name, description=description)
    db.add(workspace)
    await db.flush()
    return workspace


async def create_channel(
    db: AsyncSession,
    name: str = "#general",
    description: str = "General chatter",
    workspace: Workspace | None = None,
) -> Channel:
    channel = Channel(name=name, description=description, workspace=workspace)
    db.add(channel)
    await db.flush()
    return channel


async def create_mention(db: AsyncSession, user_name: str = "kris", text: str = "@kris") -> Mention:
    mention = Mention(user_name=user_name, text=text)
    db.add(mention)
    await db.flush()
    return mention


async def create_user_profile(
    db: AsyncSession, user_name: str = "kris", display_name: str | None = None
) -> UserProfile:
    profile = UserProfile(user_name=user_name, display_name=display_name)
    db.add(profile)
    await db.flush()
    return profile


async def create_message(
    db: AsyncSession,
    content: str = "hello",
    channel: Channel | None = None,
    mention: Mention | None = None,
    sender: UserProfile | None = None,
) -> Message:
    message = Message(content=content, channel=channel, mention=mention, sender=sender)
    db.add(message)
    await db.flush()
    return message
