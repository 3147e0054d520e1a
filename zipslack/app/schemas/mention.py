from pydantic import BaseModel


class MentionPayload(BaseModel):
    id: int | None = None
    user_name: str | None = None
    text: str | None = None


class MentionSummary(BaseModel):
    id: int
    user_name: str
    text: str


class MentionResponse(MentionSummary):
    pass
