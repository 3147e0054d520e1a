from pydantic import BaseModel

from zipslack.app.schemas.common import EntityRef
from zipslack.app.schemas.workspace import WorkspaceSummary


class ChannelPayload(BaseModel):
    id: int | None = None
    name: str | None = None
    description: str | None = None
    workspace: EntityRef | None = None


class ChannelSummary(BaseModel):
    id: int
    name: str
    description: str


class ChannelResponse(ChannelSummary):
    workspace: WorkspaceSummary | None = None
