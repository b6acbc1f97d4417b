from __future__ import annotations

from datetime import datetime
from typing import Protocol
from uuid import UUID

from mitrai_chat.domain.entities.direct_message import DirectMessage


class MessageReader(Protocol):
    async def list_for_chat(
        self,
        chat_id: str,
        *,
        limit: int | None = None,
        before: datetime | None = None,
    ) -> list[DirectMessage]:
        """Messages of a chat, oldest first. With ``limit`` the newest ``limit`` are kept."""
        ...

    async def get_by_id(self, message_id: UUID) -> DirectMessage | None: ...

    async def latest_for_chat(self, chat_id: str) -> DirectMessage | None: ...

    async def count_unread_for_user(self, user_id: str) -> int: ...

    async def unread_by_chat_for_user(self, user_id: str) -> dict[str, int]: ...


class MessageWriter(Protocol):
    async def append(self, message: DirectMessage) -> None: ...

    async def mark_read(self, chat_id: str, receiver_id: str) -> int:
        """Flip unread messages addressed to ``receiver_id`` to read. Returns rows changed."""
        ...

    async def delete(self, message_id: UUID) -> None: ...
