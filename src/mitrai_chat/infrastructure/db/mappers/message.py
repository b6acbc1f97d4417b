from __future__ import annotations

from mitrai_chat.domain.entities.direct_message import DirectMessage
from mitrai_chat.infrastructure.db.models.message import MessageModel


def model_to_entity(model: MessageModel) -> DirectMessage:
    return DirectMessage(
        id=model.id,
        chat_id=model.chat_id,
        sender_id=model.sender_id,
        sender_name=model.sender_name,
        receiver_id=model.receiver_id,
        text=model.text,
        read=model.read,
        created_at=model.created_at,
    )


def entity_to_model(entity: DirectMessage) -> MessageModel:
    return MessageModel(
        id=entity.id,
        chat_id=entity.chat_id,
        sender_id=entity.sender_id,
        sender_name=entity.sender_name,
        receiver_id=entity.receiver_id,
        text=entity.text,
        read=entity.read,
        created_at=entity.created_at,
    )
