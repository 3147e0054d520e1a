from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from zipslack.app.db import Base
from zipslack.app.models.relations import add_member, remove_member, replace_members


class Mention(Base):
    __tablename__ = "mentions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_name: Mapped[str] = mapped_column(String, nullable=False)
    text: Mapped[str] = mapped_column(String, nullable=False)

    # Relationships
    messages: Mapped[set[Message]] = relationship(
        "Message", back_populates="mention", passive_deletes=True
    )

    async def set_messages(self, messages: Iterable[Message] | None) -> Mention:
        """Replace the owned messages, re-pointing every back-reference.

        The current messages are loaded first, so this works on a mention
        fetched from the store as well as on a new one.

        Messages dropped from the set lose their ``mention``; every message in
        ``messages`` ends up pointing at this mention.
        """
        await replace_members(self, "messages", "mention", messages)
        return self

    def add_message(self, message: Message) -> Mention:
        add_member(self, "mention", message)
        return self

    def remove_message(self, message: Message) -> Mention:
        remove_member(self, "mention", message)
        return self

    def __repr__(self) -> str:
        return f"Mention(id={self.id}, user_name={self.user_name!r}, text={self.text!r})"
