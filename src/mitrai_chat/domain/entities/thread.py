from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class ChatThread:
    """Thread index row. ``user1_id``/``user2_id`` are the sorted participant pair."""

    chat_id: str
    user1_id: str
    user1_name: str
    user2_id: str
    user2_name: str
    last_message: str
    last_message_at: datetime

    def other_participant(self, user_id: str) -> tuple[str, str]:
        if user_id == self.user1_id:
            return self.user2_id, self.user2_name
        return self.user1_id, self.user1_name
