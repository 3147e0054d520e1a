"""UserProfile CRUD endpoints."""

from zipslack.app.api.resource import resource_router
from zipslack.app.schemas.user_profile import UserProfilePayload, UserProfileResponse
from zipslack.app.services.resources import user_profile_service

router = resource_router(
    "user-profiles",
    "UserProfile",
    user_profile_service,
    UserProfilePayload,
    UserProfileResponse,
)
