from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from mitrai_chat.domain.value_objects.enums import NotificationType


@dataclass(frozen=True, slots=True)
class Notification:
    id: str
    user_id: str
    type: NotificationType
    title: str
    message: str
    read: bool
    created_at: datetime
