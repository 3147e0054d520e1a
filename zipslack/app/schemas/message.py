from pydantic import BaseModel

from zipslack.app.schemas.channel import ChannelSummary
from zipslack.app.schemas.common import EntityRef
from zipslack.app.schemas.mention import MentionSummary
from zipslack.app.schemas.user_profile import UserProfileSummary


class MessagePayload(BaseModel):
    id: int | None = None
    content: str | None = None
    channel: EntityRef | None = None
    mention: EntityRef | None = None
    sender: EntityRef | None = None


class MessageResponse(BaseModel):
    id: int
    content: str
    channel: ChannelSummary | None = None
    mention: MentionSummary | None = None
    sender: UserProfileSummary | None = None
