from __future__ import annotations

from datetime import datetime
from typing import Protocol

from mitrai_chat.domain.entities.thread import ChatThread


class ThreadReader(Protocol):
    async def get_by_chat_id(self, chat_id: str) -> ChatThread | None: ...

    async def list_for_user(self, user_id: str, *, limit: int = 50) -> list[ChatThread]: ...


class ThreadWriter(Protocol):
    async def upsert_last_message(
        self,
        chat_id: str,
        user1_id: str,
        user2_id: str,
        last_message: str,
        last_message_at: datetime,
    ) -> None: ...

    async def set_last_message(
        self,
        chat_id: str,
        last_message: str,
        last_message_at: datetime,
    ) -> None: ...

    async def set_display_name(self, chat_id: str, user_id: str, name: str) -> None: ...
