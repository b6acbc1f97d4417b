from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal
from uuid import UUID

import pydantic
from pydantic import Field, TypeAdapter

from mitrai_chat.api.v1.schemas.common import CamelModel
from mitrai_chat.application.exceptions import ValidationError
from mitrai_chat.domain.value_objects.enums import ChatAction


class MessageResponse(CamelModel):
    id: UUID
    chat_id: str
    sender_id: str
    sender_name: str
    receiver_id: str
    text: str
    read: bool
    created_at: datetime


class ThreadResponse(CamelModel):
    chat_id: str
    user1_id: str
    user1_name: str
    user2_id: str
    user2_name: str
    other_user_id: str
    other_user_name: str
    last_message: str
    last_message_at: datetime
    unread_count: int
    has_unread: bool


class ThreadsResponse(CamelModel):
    threads: list[ThreadResponse]


class MessagesResponse(CamelModel):
    messages: list[MessageResponse]


class UnreadCountResponse(CamelModel):
    unread_count: int


class SendMessageResponse(CamelModel):
    message: MessageResponse


class SendMessageRequest(CamelModel):
    action: Literal["send"]
    sender_id: str = Field(min_length=1)
    sender_name: str | None = None
    receiver_id: str = Field(min_length=1)
    receiver_name: str | None = None
    text: str = Field(min_length=1)


class MarkReadRequest(CamelModel):
    action: Literal["read"]
    chat_id: str = Field(min_length=1)
    user_id: str = Field(min_length=1)


class MarkReadBody(CamelModel):
    chat_id: str = Field(min_length=1)
    user_id: str = Field(min_length=1)


class DeleteMessageRequest(CamelModel):
    message_id: UUID
    user_id: str = Field(min_length=1)


ChatActionRequest = Annotated[
    SendMessageRequest | MarkReadRequest,
    Field(discriminator="action"),
]

_chat_action_adapter: TypeAdapter[SendMessageRequest | MarkReadRequest] = TypeAdapter(
    ChatActionRequest
)

REQUIRED_FIELDS: dict[str, str] = {
    ChatAction.SEND: "senderId, receiverId, text required",
    ChatAction.READ: "chatId, userId required",
}


def parse_chat_action(payload: Any) -> SendMessageRequest | MarkReadRequest:
    """Decode a POST body into one of the action variants."""
    if not isinstance(payload, dict):
        raise ValidationError("Invalid JSON body")
    action = payload.get("action")
    if not isinstance(action, str) or action not in REQUIRED_FIELDS:
        raise ValidationError("Unknown action")
    try:
        return _chat_action_adapter.validate_python(payload)
    except pydantic.ValidationError as exc:
        raise ValidationError(REQUIRED_FIELDS[action]) from exc
