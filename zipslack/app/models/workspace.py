from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from zipslack.app.db import Base
from zipslack.app.models.relations import add_member, remove_member, replace_members


class Workspace(Base):
    __tablename__ = "workspaces"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(String, nullable=False)

    # Relationships: collections are never serialized
    channels: Mapped[set[Channel]] = relationship(
        "Channel", back_populates="workspace", passive_deletes=True
    )

    async def set_channels(self, channels: Iterable[Channel] | None) -> Workspace:
        await replace_members(self, "channels", "workspace", channels)
        return self

    def add_channel(self, channel: Channel) -> Workspace:
        add_member(self, "workspace", channel)
        return self

    def remove_channel(self, channel: Channel) -> Workspace:
        remove_member(self, "workspace", channel)
        return self

    def __repr__(self) -> str:
        return f"Workspace(id={self.id}, name={self.name!r}, description={self.description!r})"
