"""Channel CRUD endpoints."""

from zipslack.app.api.resource import resource_router
from zipslack.app.schemas.channel import ChannelPayload, ChannelResponse
from zipslack.app.services.resources import channel_service

router = resource_router("channels", "Channel", channel_service, ChannelPayload, ChannelResponse)
