from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from zipslack.app.db import Base
from zipslack.app.models.relations import add_member, remove_member, replace_members


class Channel(Base):
    __tablename__ = "channels"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False, index=True)
    description: Mapped[str] = mapped_column(String, nullable=False)
    workspace_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("workspaces.id", ondelete="SET NULL"), nullable=True
    )

    # Relationships
    workspace: Mapped[Workspace | None] = relationship(
        "Workspace", back_populates="channels", lazy="selectin"
    )
    messages: Mapped[set[Message]] = relationship(
        "Message", back_populates="channel", passive_deletes=True
    )

    async def set_messages(self, messages: Iterable[Message] | None) -> Channel:
        await replace_members(self, "messages", "channel", messages)
        return self

    def add_message(self, message: Message) -> Channel:
        add_member(self, "channel", message)
        return self

    def remove_message(self, message: Message) -> Channel:
        remove_member(self, "channel", message)
        return self

    def __repr__(self) -> str:
        return f"Channel(id={self.id}, name={self.name!r}, description={self.description!r})"
