from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SendMessageDTO:
    sender_id: str
    receiver_id: str
    text: str
    sender_name: str | None = None
    receiver_name: str | None = None
