from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class ThreadSummary:
    """A thread as seen by one of its participants."""

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

    @property
    def has_unread(self) -> bool:
        return self.unread_count > 0
