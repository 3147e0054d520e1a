from zipslack.app.models.workspace import Workspace
from zipslack.app.models.channel import Channel
from zipslack.app.models.mention import Mention
from zipslack.app.models.user_profile import UserProfile
from zipslack.app.models.message import Message

__all__ = [
    "Workspace",
    "Channel",
    "Mention",
    "UserProfile",
    "Message",
]
