from __future__ import annotations

from mitrai_chat.domain.entities.thread import ChatThread
from mitrai_chat.infrastructure.db.models.thread import ChatThreadModel


def model_to_entity(model: ChatThreadModel) -> ChatThread:
    return ChatThread(
        chat_id=model.chat_id,
        user1_id=model.user1_id,
        user1_name=model.user1_name,
        user2_id=model.user2_id,
        user2_name=model.user2_name,
        last_message=model.last_message,
        last_message_at=model.last_message_at,
    )
