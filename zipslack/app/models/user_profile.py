from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from zipslack.app.db import Base
from zipslack.app.models.relations import add_member, remove_member, replace_members


class UserProfile(Base):
    __tablename__ = "user_profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_name: Mapped[str] = mapped_column(String, nullable=False, index=True)
    display_name: Mapped[str | None] = mapped_column(String, nullable=True, default=None)

    # Relationships: messages sent by this user
    messages: Mapped[set[Message]] = relationship(
        "Message", back_populates="sender", passive_deletes=True
    )

    async def set_messages(self, messages: Iterable[Message] | None) -> UserProfile:
        await replace_members(self, "messages", "sender", messages)
        return self

    def add_message(self, message: Message) -> UserProfile:
        add_member(self, "sender", message)
        return self

    def remove_message(self, message: Message) -> UserProfile:
        remove_member(self, "sender", message)
        return self

    def __repr__(self) -> str:
        return (
            f"UserProfile(id={self.id}, user_name={self.user_name!r}, "
            f"display_name={self.display_name!r})"
        )
