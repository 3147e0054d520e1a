"""Identifier-keyed persistence over an async SQLAlchemy session."""

from collections.abc import Sequence
from typing import Generic, TypeVar

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from zipslack.app.db import Base

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def save(self, db: AsyncSession, entity: ModelT) -> ModelT:
        """Insert or update ``entity``; the id is assigned on first flush."""
        db.add(entity)
        await db.flush()
        return entity

    async def find_by_id(self, db: AsyncSession, entity_id: int) -> ModelT | None:
        return await db.get(self.model, entity_id)

    async def exists_by_id(self, db: AsyncSession, entity_id: int) -> bool:
        result = await db.execute(select(exists().where(self.model.id == entity_id)))
        return bool(result.scalar())

    async def find_all(self, db: AsyncSession) -> Sequence[ModelT]:
        result = await db.execute(select(self.model).order_by(self.model.id))
        return result.scalars().all()

    async def delete_by_id(self, db: AsyncSession, entity_id: int) -> None:
        entity = await db.get(self.model, entity_id)
        if entity is None:
            return
        await db.delete(entity)
        await db.flush()
