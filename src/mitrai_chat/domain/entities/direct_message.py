from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, slots=True)
class DirectMessage:
    id: UUID
    chat_id: str
    sender_id: str
    sender_name: str
    receiver_id: str
    text: str
    read: bool
    created_at: datetime
