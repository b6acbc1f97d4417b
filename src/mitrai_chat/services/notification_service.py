from __future__ import annotations

import secrets
from datetime import datetime

from mitrai_chat.application.uow import UnitOfWork
from mitrai_chat.domain.entities.direct_message import DirectMessage
from mitrai_chat.domain.entities.notification import Notification
from mitrai_chat.domain.value_objects.enums import NotificationType

NEW_MESSAGE_TITLE = "New Message"
DEFAULT_PREVIEW_LENGTH = 50


def make_notification_id(now: datetime) -> str:
    """Time-ordered id with a short random suffix. Collisions are unlikely, not impossible."""
    return f"notif_{int(now.timestamp() * 1000)}_{secrets.token_hex(3)}"


def preview(text: str, length: int = DEFAULT_PREVIEW_LENGTH) -> str:
    if len(text) <= length:
        return text
    return f"{text[:length]}..."


def new_message_notification(
    message: DirectMessage,
    now: datetime,
    *,
    preview_length: int = DEFAULT_PREVIEW_LENGTH,
) -> Notification:
    return Notification(
        id=make_notification_id(now),
        user_id=message.receiver_id,
        type=NotificationType.SESSION_REQUEST,
        title=NEW_MESSAGE_TITLE,
        message=preview(message.text, preview_length),
        read=False,
        created_at=now,
    )


async def notify(notification: Notification, uow: UnitOfWork) -> None:
    await uow.notifications_w.add(notification)
    await uow.commit()


async def list_notifications(
    user_id: str,
    uow: UnitOfWork,
    *,
    limit: int = 100,
) -> list[Notification]:
    return await uow.notifications.list_for_user(user_id, limit=limit)


async def mark_read(user_id: str, notification_id: str, uow: UnitOfWork) -> None:
    await uow.notifications_w.mark_read(user_id, notification_id)
    await uow.commit()
