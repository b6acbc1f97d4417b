"""In-memory stand-ins for the storage handle and outbound ports."""
from __future__ import annotations

import asyncio
import dataclasses
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from mitrai_chat.application.exceptions import StorageError
from mitrai_chat.domain.entities.direct_message import DirectMessage
from mitrai_chat.domain.entities.notification import Notification
from mitrai_chat.domain.entities.thread import ChatThread
from mitrai_chat.domain.value_objects.ids import chat_id_of


def make_message(
    *,
    sender_id: str = "alice",
    receiver_id: str = "bob",
    text: str = "hello",
    read: bool = False,
    created_at: datetime | None = None,
) -> DirectMessage:
    return DirectMessage(
        id=uuid.uuid4(),
        chat_id=chat_id_of(sender_id, receiver_id),
        sender_id=sender_id,
        sender_name=sender_id.title(),
        receiver_id=receiver_id,
        text=text,
        read=read,
        created_at=created_at or datetime.now(timezone.utc),
    )


@dataclass
class FakeMessageReader:
    _messages: list[DirectMessage] = field(default_factory=list)

    async def list_for_chat(
        self,
        chat_id: str,
        *,
        limit: int | None = None,
        before: datetime | None = None,
    ) -> list[DirectMessage]:
        items = sorted(
            (
                m for m in self._messages
                if m.chat_id == chat_id and (before is None or m.created_at < before)
            ),
            key=lambda m: (m.created_at, str(m.id)),
        )
        if limit is not None:
            items = items[-limit:]
        return items

    async def get_by_id(self, message_id: UUID) -> DirectMessage | None:
        return next((m for m in self._messages if m.id == message_id), None)

    async def latest_for_chat(self, chat_id: str) -> DirectMessage | None:
        items = await self.list_for_chat(chat_id)
        return items[-1] if items else None

    async def count_unread_for_user(self, user_id: str) -> int:
        return sum(1 for m in self._messages if m.receiver_id == user_id and not m.read)

    async def unread_by_chat_for_user(self, user_id: str) -> dict[str, int]:
        counts: dict[str, int] = {}
        for m in self._messages:
            if m.receiver_id == user_id and not m.read:
                counts[m.chat_id] = counts.get(m.chat_id, 0) + 1
        return counts


@dataclass
class FakeMessageWriter:
    _reader: FakeMessageReader
    fail: bool = False

    async def append(self, message: DirectMessage) -> None:
        if self.fail:
            raise StorageError("insert into messages failed")
        self._reader._messages.append(message)

    async def mark_read(self, chat_id: str, receiver_id: str) -> int:
        changed = 0
        messages = self._reader._messages
        for i, m in enumerate(messages):
            if m.chat_id == chat_id and m.receiver_id == receiver_id and not m.read:
                messages[i] = dataclasses.replace(m, read=True)
                changed += 1
        return changed

    async def delete(self, message_id: UUID) -> None:
        self._reader._messages[:] = [m for m in self._reader._messages if m.id != message_id]


@dataclass
class FakeThreadReader:
    _threads: dict[str, ChatThread] = field(default_factory=dict)

    async def get_by_chat_id(self, chat_id: str) -> ChatThread | None:
        return self._threads.get(chat_id)

    async def list_for_user(self, user_id: str, *, limit: int = 50) -> list[ChatThread]:
        threads = [
            t for t in self._threads.values() if user_id in (t.user1_id, t.user2_id)
        ]
        threads.sort(key=lambda t: t.last_message_at, reverse=True)
        return threads[:limit]


@dataclass
class FakeThreadWriter:
    _reader: FakeThreadReader
    fail_names: bool = False

    async def upsert_last_message(
        self,
        chat_id: str,
        user1_id: str,
        user2_id: str,
        last_message: str,
        last_message_at: datetime,
    ) -> None:
        existing = self._reader._threads.get(chat_id)
        if existing is None:
            self._reader._threads[chat_id] = ChatThread(
                chat_id=chat_id,
                user1_id=user1_id,
                user1_name="",
                user2_id=user2_id,
                user2_name="",
                last_message=last_message,
                last_message_at=last_message_at,
            )
        else:
            await self.set_last_message(chat_id, last_message, last_message_at)

    async def set_last_message(
        self,
        chat_id: str,
        last_message: str,
        last_message_at: datetime,
    ) -> None:
        thread = self._reader._threads[chat_id]
        self._reader._threads[chat_id] = dataclasses.replace(
            thread, last_message=last_message, last_message_at=last_message_at,
        )

    async def set_display_name(self, chat_id: str, user_id: str, name: str) -> None:
        if self.fail_names:
            raise StorageError("update chat_threads failed")
        thread = self._reader._threads.get(chat_id)
        if thread is None:
            return
        if thread.user1_id == user_id:
            thread = dataclasses.replace(thread, user1_name=name)
        elif thread.user2_id == user_id:
            thread = dataclasses.replace(thread, user2_name=name)
        self._reader._threads[chat_id] = thread


@dataclass
class FakeNotificationReader:
    _notifications: list[Notification] = field(default_factory=list)

    async def list_for_user(self, user_id: str, *, limit: int = 100) -> list[Notification]:
        items = [n for n in self._notifications if n.user_id == user_id]
        items.sort(key=lambda n: n.created_at, reverse=True)
        return items[:limit]


@dataclass
class FakeNotificationWriter:
    _reader: FakeNotificationReader
    fail: bool = False

    async def add(self, notification: Notification) -> None:
        if self.fail:
            raise StorageError("insert into notifications failed")
        self._reader._notifications.append(notification)

    async def mark_read(self, user_id: str, notification_id: str) -> None:
        items = self._reader._notifications
        for i, n in enumerate(items):
            if n.id == notification_id and n.user_id == user_id:
                items[i] = dataclasses.replace(n, read=True)


@dataclass
class FakeUoW:
    """In-memory UoW for unit tests."""
    messages: FakeMessageReader = field(default_factory=FakeMessageReader)
    messages_w: FakeMessageWriter | None = None
    threads: FakeThreadReader = field(default_factory=FakeThreadReader)
    threads_w: FakeThreadWriter | None = None
    notifications: FakeNotificationReader = field(default_factory=FakeNotificationReader)
    notifications_w: FakeNotificationWriter | None = None
    commits: int = 0
    rollbacks: int = 0

    def __post_init__(self) -> None:
        if self.messages_w is None:
            self.messages_w = FakeMessageWriter(self.messages)
        if self.threads_w is None:
            self.threads_w = FakeThreadWriter(self.threads)
        if self.notifications_w is None:
            self.notifications_w = FakeNotificationWriter(self.notifications)

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1


@dataclass
class FakeRateLimiter:
    allow: bool = True
    keys: list[str] = field(default_factory=list)

    async def hit(self, key: str, limit: int, window_seconds: int) -> bool:
        self.keys.append(key)
        return self.allow


@dataclass
class FakeTurnProvider:
    servers: list[dict[str, Any]] = field(default_factory=list)
    error: Exception | None = None
    hang: bool = False

    async def fetch(self) -> list[dict[str, Any]]:
        if self.hang:
            await asyncio.Event().wait()
        if self.error is not None:
            raise self.error
        return self.servers
