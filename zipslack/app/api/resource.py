"""Router factory mapping the six CRUD verbs onto a ``ResourceService``."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from zipslack.app.api.headers import (
    entity_creation_alert,
    entity_deletion_alert,
    entity_update_alert,
)
from zipslack.app.db import get_db
from zipslack.app.services.resource_service import ResourceService

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def resource_router(
    path: str,
    label: str,
    service: ResourceService,
    payload_schema: type[BaseModel],
    response_schema: type[BaseModel],
) -> APIRouter:
    """Build the ``/<path>`` router for one entity type.

    ``label`` is the human-readable entity name used in log lines and 404
    details, e.g. ``"Channel"``.
    """
    router = APIRouter(prefix=f"/{path}", tags=[path])
    slug = path.replace("-", "_")

    @router.post("", response_model=response_schema, status_code=201, name=f"create_{slug}")
    async def create(
        data: payload_schema,  # type: ignore[valid-type]
        response: Response,
        db: AsyncSession = Depends(get_db),
    ):
        logger.debug("REST request to save %s : %s", label, data)
        entity = await service.create(db, data)
        response.headers["Location"] = f"{API_PREFIX}/{path}/{entity.id}"
        response.headers.update(entity_creation_alert(service.entity_name, entity.id))
        return entity

    @router.put("/{entity_id}", response_model=response_schema, name=f"update_{slug}")
    async def replace(
        entity_id: int,
        data: payload_schema,  # type: ignore[valid-type]
        response: Response,
        db: AsyncSession = Depends(get_db),
    ):
        logger.debug("REST request to update %s : %s, %s", label, entity_id, data)
        entity = await service.replace(db, entity_id, data)
        response.headers.update(entity_update_alert(service.entity_name, entity.id))
        return entity

    # Accepts application/json and application/merge-patch+json bodies alike
    @router.patch("/{entity_id}", response_model=response_schema, name=f"partial_update_{slug}")
    async def partial_update(
        entity_id: int,
        data: payload_schema,  # type: ignore[valid-type]
        response: Response,
        db: AsyncSession = Depends(get_db),
    ):
        logger.debug("REST request to partial update %s : %s, %s", label, entity_id, data)
        entity = await service.partial_update(db, entity_id, data)
        response.headers.update(entity_update_alert(service.entity_name, entity.id))
        return entity

    @router.get("", response_model=list[response_schema], name=f"list_{slug}")
    async def list_all(db: AsyncSession = Depends(get_db)):
        logger.debug("REST request to get all %ss", label)
        return list(await service.find_all(db))

    @router.get("/{entity_id}", response_model=response_schema, name=f"get_{slug}")
    async def get_one(entity_id: int, db: AsyncSession = Depends(get_db)):
        logger.debug("REST request to get %s : %s", label, entity_id)
        entity = await service.find_one(db, entity_id)
        if entity is None:
            raise HTTPException(status_code=404, detail=f"{label} not found")
        return entity

    @router.delete(
        "/{entity_id}", status_code=204, response_class=Response, name=f"delete_{slug}"
    )
    async def delete(entity_id: int, db: AsyncSession = Depends(get_db)) -> Response:
        logger.debug("REST request to delete %s : %s", label, entity_id)
        await service.delete(db, entity_id)
        headers = entity_deletion_alert(service.entity_name, entity_id)
        return Response(status_code=204, headers=headers)

    return router
