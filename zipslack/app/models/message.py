from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from zipslack.app.db import Base


class Message(Base):
    __tablename__ = "messages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    content: Mapped[str] = mapped_column(String, nullable=False)
    channel_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("channels.id", ondelete="SET NULL"), nullable=True, index=True
    )
    mention_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("mentions.id", ondelete="SET NULL"), nullable=True
    )
    sender_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("user_profiles.id", ondelete="SET NULL"), nullable=True
    )

    # Back-references; the owning side edits these through its set/add/remove helpers
    channel: Mapped[Channel | None] = relationship(
        "Channel", back_populates="messages", lazy="selectin"
    )
    mention: Mapped[Mention | None] = relationship(
        "Mention", back_populates="messages", lazy="selectin"
    )
    sender: Mapped[UserProfile | None] = relationship(
        "UserProfile", back_populates="messages", lazy="selectin"
    )

    def __repr__(self) -> str:
        return f"Message(id={self.id}, content={self.content!r})"
