"""Message CRUD endpoints."""

from zipslack.app.api.resource import resource_router
from zipslack.app.schemas.message import MessagePayload, MessageResponse
from zipslack.app.services.resources import message_service

router = resource_router("messages", "Message", message_service, MessagePayload, MessageResponse)
