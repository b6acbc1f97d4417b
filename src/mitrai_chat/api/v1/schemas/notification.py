from __future__ import annotations

from datetime import datetime

from pydantic import Field

from mitrai_chat.api.v1.schemas.common import CamelModel
from mitrai_chat.domain.value_objects.enums import NotificationType


class NotificationResponse(CamelModel):
    id: str
    user_id: str
    type: NotificationType
    title: str
    message: str
    read: bool
    created_at: datetime


class NotificationsResponse(CamelModel):
    success: bool = True
    data: list[NotificationResponse]


class MarkNotificationReadRequest(CamelModel):
    user_id: str = Field(min_length=1)
    notification_id: str = Field(min_length=1)
