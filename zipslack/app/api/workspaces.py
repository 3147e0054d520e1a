"""Workspace CRUD endpoints."""

from zipslack.app.api.resource import resource_router
from zipslack.app.schemas.workspace import WorkspacePayload, WorkspaceResponse
from zipslack.app.services.resources import workspace_service

router = resource_router(
    "workspaces", "Workspace", workspace_service, WorkspacePayload, WorkspaceResponse
)
