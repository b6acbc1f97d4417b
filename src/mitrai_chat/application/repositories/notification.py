from __future__ import annotations

from typing import Protocol

from mitrai_chat.domain.entities.notification import Notification


class NotificationReader(Protocol):
    async def list_for_user(self, user_id: str, *, limit: int = 100) -> list[Notification]: ...


class NotificationWriter(Protocol):
    async def add(self, notification: Notification) -> None: ...

    async def mark_read(self, user_id: str, notification_id: str) -> None: ...
