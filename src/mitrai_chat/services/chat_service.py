"""Direct-message store: message history, read tracking and thread summaries.

Every function receives the storage handle (``UnitOfWork``) explicitly.
"""
from __future__ import annotations

import logging
import uuid
from datetime import datetime

from mitrai_chat.application.dto.message import SendMessageDTO
from mitrai_chat.application.dto.thread import ThreadSummary
from mitrai_chat.application.exceptions import ValidationError
from mitrai_chat.application.ports.clock import Clock, SystemClock
from mitrai_chat.application.uow import UnitOfWork
from mitrai_chat.domain.entities.direct_message import DirectMessage
from mitrai_chat.domain.value_objects.ids import chat_id_of
from mitrai_chat.services import notification_service

logger = logging.getLogger(__name__)

DEFAULT_SENDER_NAME = "Unknown"
DEFAULT_MAX_LENGTH = 2000


async def list_messages(
    chat_id: str,
    uow: UnitOfWork,
    *,
    limit: int | None = None,
    before: datetime | None = None,
) -> list[DirectMessage]:
    return await uow.messages.list_for_chat(chat_id, limit=limit, before=before)


async def add_message(message: DirectMessage, uow: UnitOfWork) -> DirectMessage:
    """Persist one message and move the thread's last-message pointer.

    There is no deduplication: adding the same message twice stores it twice.
    Raises StorageError when the store rejects the write.
    """
    user1_id, user2_id = sorted((message.sender_id, message.receiver_id))
    await uow.messages_w.append(message)
    await uow.threads_w.upsert_last_message(
        message.chat_id,
        user1_id,
        user2_id,
        message.text,
        message.created_at,
    )
    await uow.commit()
    return message


def clean_text(cmd: SendMessageDTO, *, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """Return the trimmed text, or raise ValidationError for a send that cannot be stored."""
    text = cmd.text.strip()
    if not cmd.sender_id or not cmd.receiver_id or not text:
        raise ValidationError("senderId, receiverId, text required")
    if len(text) > max_length:
        raise ValidationError(f"Message too long (max {max_length} chars)")
    return text


async def send_message(
    cmd: SendMessageDTO,
    uow: UnitOfWork,
    *,
    clock: Clock | None = None,
    max_length: int = DEFAULT_MAX_LENGTH,
    preview_length: int = notification_service.DEFAULT_PREVIEW_LENGTH,
) -> DirectMessage:
    text = clean_text(cmd, max_length=max_length)

    clock = clock or SystemClock()
    chat_id = chat_id_of(cmd.sender_id, cmd.receiver_id)
    message = DirectMessage(
        id=uuid.uuid4(),
        chat_id=chat_id,
        sender_id=cmd.sender_id,
        sender_name=cmd.sender_name or DEFAULT_SENDER_NAME,
        receiver_id=cmd.receiver_id,
        text=text,
        read=False,
        created_at=clock.now(),
    )
    await add_message(message, uow)

    # Everything below is best-effort: the message is already committed.
    notification = notification_service.new_message_notification(
        message, clock.now(), preview_length=preview_length,
    )
    try:
        await notification_service.notify(notification, uow)
    except Exception:  # noqa: BLE001
        logger.warning(
            "Notification for message %s to %s was not stored",
            message.id,
            message.receiver_id,
            exc_info=True,
        )
        await _discard(uow)

    for user_id, name in (
        (cmd.receiver_id, cmd.receiver_name),
        (cmd.sender_id, cmd.sender_name),
    ):
        if not name:
            continue
        try:
            await update_thread_display_name(chat_id, user_id, name, uow)
        except Exception:  # noqa: BLE001
            logger.warning(
                "Display name update failed chat_id=%s user_id=%s",
                chat_id,
                user_id,
                exc_info=True,
            )
            await _discard(uow)

    return message


async def mark_read(chat_id: str, user_id: str, uow: UnitOfWork) -> int:
    """Mark every unread message addressed to ``user_id`` in the chat as read.

    Returns how many messages changed; 0 when there was nothing to do.
    """
    changed = await uow.messages_w.mark_read(chat_id, user_id)
    if changed:
        await uow.commit()
        logger.debug("Marked %d messages read chat_id=%s user_id=%s", changed, chat_id, user_id)
    return changed


async def list_threads(user_id: str, uow: UnitOfWork, *, limit: int = 50) -> list[ThreadSummary]:
    threads = await uow.threads.list_for_user(user_id, limit=limit)
    unread = await uow.messages.unread_by_chat_for_user(user_id)
    summaries = []
    for thread in threads:
        other_id, other_name = thread.other_participant(user_id)
        summaries.append(
            ThreadSummary(
                chat_id=thread.chat_id,
                user1_id=thread.user1_id,
                user1_name=thread.user1_name,
                user2_id=thread.user2_id,
                user2_name=thread.user2_name,
                other_user_id=other_id,
                other_user_name=other_name,
                last_message=thread.last_message,
                last_message_at=thread.last_message_at,
                unread_count=unread.get(thread.chat_id, 0),
            )
        )
    return summaries


async def unread_count(user_id: str, uow: UnitOfWork) -> int:
    return await uow.messages.count_unread_for_user(user_id)


async def update_thread_display_name(
    chat_id: str,
    user_id: str,
    name: str,
    uow: UnitOfWork,
) -> None:
    await uow.threads_w.set_display_name(chat_id, user_id, name)
    await uow.commit()


async def delete_message(
    message_id: uuid.UUID,
    user_id: str,
    uow: UnitOfWork,
    *,
    clock: Clock | None = None,
) -> bool:
    """Delete a message on behalf of its sender. False if missing or not theirs."""
    message = await uow.messages.get_by_id(message_id)
    if message is None or message.sender_id != user_id:
        return False

    await uow.messages_w.delete(message_id)
    latest = await uow.messages.latest_for_chat(message.chat_id)
    if latest is not None:
        await uow.threads_w.set_last_message(message.chat_id, latest.text, latest.created_at)
    else:
        now = (clock or SystemClock()).now()
        await uow.threads_w.set_last_message(message.chat_id, "", now)
    await uow.commit()
    return True


async def _discard(uow: UnitOfWork) -> None:
    try:
        await uow.rollback()
    except Exception:  # noqa: BLE001
        logger.exception("Rollback after a best-effort write failed")
