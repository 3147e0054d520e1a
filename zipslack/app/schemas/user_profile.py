from pydantic import BaseModel


class UserProfilePayload(BaseModel):
    id: int | None = None
    user_name: str | None = None
    display_name: str | None = None


class UserProfileSummary(BaseModel):
    id: int
    user_name: str
    display_name: str | None = None


class UserProfileResponse(UserProfileSummary):
    pass
