from __future__ import annotations

from sqlalchemy import select, update

from mitrai_chat.domain.entities.notification import Notification
from mitrai_chat.infrastructure.db.mappers import notification as mapper
from mitrai_chat.infrastructure.db.models.notification import NotificationModel
from mitrai_chat.infrastructure.db.repositories._base import SqlAlchemyRepo


class NotificationReaderRepo(SqlAlchemyRepo):
    async def list_for_user(self, user_id: str, *, limit: int = 100) -> list[Notification]:
        stmt = (
            select(NotificationModel)
            .where(NotificationModel.user_id == user_id)
            .order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
            .limit(limit)
        )
        result = await self._execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]


class NotificationWriterRepo(SqlAlchemyRepo):
    async def add(self, notification: Notification) -> None:
        self._session.add(mapper.entity_to_model(notification))

    async def mark_read(self, user_id: str, notification_id: str) -> None:
        stmt = (
            update(NotificationModel)
            .where(
                NotificationModel.id == notification_id,
                NotificationModel.user_id == user_id,
            )
            .values(read=True)
        )
        await self._execute(stmt)
