from zipslack.app.schemas.channel import ChannelPayload, ChannelResponse, ChannelSummary
from zipslack.app.schemas.common import EntityRef
from zipslack.app.schemas.mention import MentionPayload, MentionResponse, MentionSummary
from zipslack.app.schemas.message import MessagePayload, MessageResponse
from zipslack.app.schemas.user_profile import (
    UserProfilePayload,
    UserProfileResponse,
    UserProfileSummary,
)
from zipslack.app.schemas.workspace import WorkspacePayload, WorkspaceResponse, WorkspaceSummary

__all__ = [
    "EntityRef",
    "WorkspacePayload",
    "WorkspaceSummary",
    "WorkspaceResponse",
    "ChannelPayload",
    "ChannelSummary",
    "ChannelResponse",
    "MentionPayload",
    "MentionSummary",
    "MentionResponse",
    "UserProfilePayload",
    "UserProfileSummary",
    "UserProfileResponse",
    "MessagePayload",
    "MessageResponse",
]
