"""Resource service instances, one per entity type."""

from zipslack.app.models.channel import Channel
from zipslack.app.models.mention import Mention
from zipslack.app.models.message import Message
from zipslack.app.models.user_profile import UserProfile
from zipslack.app.models.workspace import Workspace
from zipslack.app.services.resource_service import ResourceService

workspace_service = ResourceService(
    Workspace,
    "workspace",
    fields=("name", "description"),
    required=("name", "description"),
)

channel_service = ResourceService(
    Channel,
    "channel",
    fields=("name", "description"),
    required=("name", "description"),
    relations={"workspace": Workspace},
)

mention_service = ResourceService(
    Mention,
    "mention",
    fields=("user_name", "text"),
    required=("user_name", "text"),
)

user_profile_service = ResourceService(
    UserProfile,
    "userProfile",
    fields=("user_name", "display_name"),
    required=("user_name",),
)

message_service = ResourceService(
    Message,
    "message",
    fields=("content",),
    required=("content",),
    relations={"channel": Channel, "mention": Mention, "sender": UserProfile},
)
