"""Uniform create/replace/patch/list/get/delete semantics for every entity.

Each entity type gets one ``ResourceService`` describing its scalar fields,
which of them are required, and which back-references a request body may
point at. The service runs inside the caller's session; it flushes but
never commits.
"""

import logging
from collections.abc import Iterable, Sequence
from typing import Generic

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from zipslack.app.db import Base
from zipslack.app.errors import ConflictError, NotFoundError, ValidationError
from zipslack.app.repository import ModelT, Repository

logger = logging.getLogger(__name__)


class ResourceService(Generic[ModelT]):
    def __init__(
        self,
        model: type[ModelT],
        entity_name: str,
        fields: Iterable[str],
        required: Iterable[str] = (),
        relations: dict[str, type[Base]] | None = None,
    ) -> None:
        self.model = model
        self.entity_name = entity_name
        self.fields = tuple(fields)
        self.required = tuple(required)
        self.relations = dict(relations or {})
        self.repository: Repository[ModelT] = Repository(model)

    # --- Validation ---

    def require_fields(self, data: BaseModel) -> None:
        """Reject a body missing any required scalar field."""
        for field in self.required:
            if getattr(data, field, None) is None:
                raise ValidationError(f"{field} must not be null", self.entity_name, "fieldrequired")

    def check_identifier(self, entity_id: int, data: BaseModel) -> None:
        """Path and body identifiers must both be present and agree."""
        if data.id is None:
            raise ValidationError("Invalid id", self.entity_name, "idnull")
        if data.id != entity_id:
            raise ValidationError("Invalid ID", self.entity_name, "idinvalid")

    async def _resolve_relations(self, db: AsyncSession, data: BaseModel) -> dict[str, Base | None]:
        resolved: dict[str, Base | None] = {}
        for name, target in self.relations.items():
            ref = getattr(data, name, None)
            if ref is None:
                resolved[name] = None
                continue
            related = await db.get(target, ref.id)
            if related is None:
                raise ValidationError(
                    f"{name} {ref.id} does not exist", self.entity_name, "relationnotfound"
                )
            resolved[name] = related
        return resolved

    def _not_found(self) -> NotFoundError:
        return NotFoundError("Entity not found", self.entity_name, "idnotfound")

    # --- Operations ---

    async def create(self, db: AsyncSession, data: BaseModel) -> ModelT:
        self.require_fields(data)
        if data.id is not None:
            raise ConflictError(
                f"A new {self.entity_name} cannot already have an ID", self.entity_name, "idexists"
            )

        values = {field: getattr(data, field) for field in self.fields}
        values.update(await self._resolve_relations(db, data))
        entity = self.model(**values)
        return await self.repository.save(db, entity)

    async def replace(self, db: AsyncSession, entity_id: int, data: BaseModel) -> ModelT:
        """Overwrite every scalar field and back-reference of an existing entity."""
        self.require_fields(data)
        self.check_identifier(entity_id, data)
        if not await self.repository.exists_by_id(db, entity_id):
            raise self._not_found()

        relations = await self._resolve_relations(db, data)
        entity = await self.repository.find_by_id(db, entity_id)
        if entity is None:
            # Deleted between the existence check and the load
            raise self._not_found()

        for field in self.fields:
            setattr(entity, field, getattr(data, field))
        for name, related in relations.items():
            setattr(entity, name, related)
        return await self.repository.save(db, entity)

    async def partial_update(self, db: AsyncSession, entity_id: int, data: BaseModel) -> ModelT:
        """Merge the non-null scalar fields of ``data`` into the stored entity.

        The existence check and the merge act on the same loaded row inside
        the request's session. Back-references are left untouched.
        """
        self.check_identifier(entity_id, data)
        entity = await self.repository.find_by_id(db, entity_id)
        if entity is None:
            raise self._not_found()

        changes = data.model_dump(include=set(self.fields), exclude_none=True)
        for field, value in changes.items():
            setattr(entity, field, value)
        logger.debug("Merged %s into %s %d", sorted(changes), self.entity_name, entity_id)
        return await self.repository.save(db, entity)

    async def find_all(self, db: AsyncSession) -> Sequence[ModelT]:
        return await self.repository.find_all(db)

    async def find_one(self, db: AsyncSession, entity_id: int) -> ModelT | None:
        return await self.repository.find_by_id(db, entity_id)

    async def delete(self, db: AsyncSession, entity_id: int) -> None:
        await self.repository.delete_by_id(db, entity_id)
