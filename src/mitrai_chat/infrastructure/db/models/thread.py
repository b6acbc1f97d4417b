from __future__ import annotations

from datetime import datetime

from sqlalchemy import Index, String, Text, text
from sqlalchemy.dialects.postgresql import TIMESTAMP
from sqlalchemy.orm import Mapped, mapped_column

from mitrai_chat.infrastructure.db.base import Base


class ChatThreadModel(Base):
    __tablename__ = "chat_threads"

    chat_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    user1_id: Mapped[str] = mapped_column(String(128), nullable=False)
    user1_name: Mapped[str] = mapped_column(
        String(255), nullable=False, default="", server_default=text("''"),
    )
    user2_id: Mapped[str] = mapped_column(String(128), nullable=False)
    user2_name: Mapped[str] = mapped_column(
        String(255), nullable=False, default="", server_default=text("''"),
    )
    last_message: Mapped[str] = mapped_column(
        Text, nullable=False, default="", server_default=text("''"),
    )
    last_message_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("now()"),
    )

    __table_args__ = (
        Index("ix_chat_threads_user1", "user1_id", "last_message_at"),
        Index("ix_chat_threads_user2", "user2_id", "last_message_at"),
    )
