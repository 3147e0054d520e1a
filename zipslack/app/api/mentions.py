"""Mention CRUD endpoints."""

from zipslack.app.api.resource import resource_router
from zipslack.app.schemas.mention import MentionPayload, MentionResponse
from zipslack.app.services.resources import mention_service

router = resource_router("mentions", "Mention", mention_service, MentionPayload, MentionResponse)
