from collections.abc import AsyncGenerator

from sqlalchemy import event, select
from sqlalchemy.ext.asyncio import (
    AsyncAttrs,
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from zipslack.app.config import DATA_DIR, DATABASE_URL, settings


class Base(AsyncAttrs, DeclarativeBase):
    """Declarative base with identifier-based equality.

    Two instances are equal only when both carry the same non-null ``id``.
    The hash is per-class so it stays stable when the store assigns the id.
    """

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, type(self)):
            return False
        return self.id is not None and self.id == other.id

    def __hash__(self) -> int:
        return hash(type(self))


_SQLITE_PRAGMAS = (
    "PRAGMA journal_mode = WAL",
    "PRAGMA synchronous = NORMAL",
    "PRAGMA foreign_keys = ON",
    "PRAGMA busy_timeout = 5000",
)


def install_sqlite_pragmas(target: AsyncEngine) -> None:
    """Apply the SQLite pragmas on every new DB-API connection of ``target``.

    ``foreign_keys`` is a per-connection setting in SQLite and backs the
    ``ON DELETE SET NULL`` clauses on the back-reference columns.
    """

    @event.listens_for(target.sync_engine, "connect")
    def _set_pragmas(dbapi_connection, connection_record) -> None:
        cursor = dbapi_connection.cursor()
        for pragma in _SQLITE_PRAGMAS:
            cursor.execute(pragma)
        cursor.close()


engine = create_async_engine(
    DATABASE_URL,
    echo=False,
    connect_args={"check_same_thread": False},
)
install_sqlite_pragmas(engine)

async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions.

    One session per request: committed when the handler returns, rolled back
    on every error path.
    """
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Create all tables and seed defaults."""
    import zipslack.app.models  # noqa: F401 (registers the mappers)

    DATA_DIR.mkdir(parents=True, exist_ok=True)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if settings.seed_defaults:
        async with async_session() as session:
            await seed_defaults(session)
            await session.commit()


async def seed_defaults(session: AsyncSession) -> None:
    """Create a default workspace holding a #general channel on an empty store."""
    from zipslack.app.models.channel import Channel
    from zipslack.app.models.workspace import Workspace

    result = await session.execute(select(Workspace).limit(1))
    if result.scalar_one_or_none() is not None:
        return

    workspace = Workspace(name="zipslack", description="Default workspace")
    workspace.add_channel(Channel(name="#general", description="Company-wide announcements"))
    session.add(workspace)
    await session.flush()
