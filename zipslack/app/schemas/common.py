from pydantic import BaseModel


class EntityRef(BaseModel):
    """Reference to an existing entity by identifier, e.g. ``{"id": 3}``."""

    id: int
