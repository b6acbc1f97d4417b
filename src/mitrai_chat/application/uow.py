from __future__ import annotations

from typing import Protocol

from mitrai_chat.application.repositories.message import MessageReader, MessageWriter
from mitrai_chat.application.repositories.notification import (
    NotificationReader,
    NotificationWriter,
)
from mitrai_chat.application.repositories.thread import ThreadReader, ThreadWriter


class UnitOfWork(Protocol):
    messages: MessageReader
    messages_w: MessageWriter
    threads: ThreadReader
    threads_w: ThreadWriter
    notifications: NotificationReader
    notifications_w: NotificationWriter

    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...
