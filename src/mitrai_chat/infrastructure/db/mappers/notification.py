from __future__ import annotations

from mitrai_chat.domain.entities.notification import Notification
from mitrai_chat.domain.value_objects.enums import NotificationType
from mitrai_chat.infrastructure.db.models.notification import NotificationModel


def model_to_entity(model: NotificationModel) -> Notification:
    return Notification(
        id=model.id,
        user_id=model.user_id,
        type=NotificationType(model.type),
        title=model.title,
        message=model.message,
        read=model.read,
        created_at=model.created_at,
    )


def entity_to_model(entity: Notification) -> NotificationModel:
    return NotificationModel(
        id=entity.id,
        user_id=entity.user_id,
        type=entity.type.value,
        title=entity.title,
        message=entity.message,
        read=entity.read,
        created_at=entity.created_at,
    )
