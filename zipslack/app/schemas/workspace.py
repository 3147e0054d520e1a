from pydantic import BaseModel


class WorkspacePayload(BaseModel):
    id: int | None = None
    name: str | None = None
    description: str | None = None


class WorkspaceSummary(BaseModel):
    id: int
    name: str
    description: str


class WorkspaceResponse(WorkspaceSummary):
    pass
