from __future__ import annotations

from typing import NewType

ChatId = NewType("ChatId", str)

CHAT_ID_SEPARATOR = "__"


def chat_id_of(user_a: str, user_b: str) -> ChatId:
    """Order-independent key for the conversation between two users."""
    return ChatId(CHAT_ID_SEPARATOR.join(sorted((user_a, user_b))))
