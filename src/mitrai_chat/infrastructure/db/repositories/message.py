from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, func, select, update

from mitrai_chat.domain.entities.direct_message import DirectMessage
from mitrai_chat.infrastructure.db.mappers import message as mapper
from mitrai_chat.infrastructure.db.models.message import MessageModel
from mitrai_chat.infrastructure.db.repositories._base import SqlAlchemyRepo


class MessageReaderRepo(SqlAlchemyRepo):
    async def list_for_chat(
        self,
        chat_id: str,
        *,
        limit: int | None = None,
        before: datetime | None = None,
    ) -> list[DirectMessage]:
        stmt = select(MessageModel).where(MessageModel.chat_id == chat_id)
        if before is not None:
            stmt = stmt.where(MessageModel.created_at < before)

        if limit is None:
            stmt = stmt.order_by(MessageModel.created_at.asc(), MessageModel.id.asc())
            result = await self._execute(stmt)
            return [mapper.model_to_entity(m) for m in result.scalars().all()]

        # Newest page first, then flipped back to chronological order
        stmt = stmt.order_by(
            MessageModel.created_at.desc(), MessageModel.id.desc(),
        ).limit(limit)
        result = await self._execute(stmt)
        models = list(result.scalars().all())
        models.reverse()
        return [mapper.model_to_entity(m) for m in models]

    async def get_by_id(self, message_id: UUID) -> DirectMessage | None:
        result = await self._execute(
            select(MessageModel).where(MessageModel.id == message_id)
        )
        model = result.scalar_one_or_none()
        return mapper.model_to_entity(model) if model else None

    async def latest_for_chat(self, chat_id: str) -> DirectMessage | None:
        stmt = (
            select(MessageModel)
            .where(MessageModel.chat_id == chat_id)
            .order_by(MessageModel.created_at.desc(), MessageModel.id.desc())
            .limit(1)
        )
        result = await self._execute(stmt)
        model = result.scalar_one_or_none()
        return mapper.model_to_entity(model) if model else None

    async def count_unread_for_user(self, user_id: str) -> int:
        stmt = select(func.count()).select_from(MessageModel).where(
            MessageModel.receiver_id == user_id,
            MessageModel.read.is_(False),
        )
        result = await self._execute(stmt)
        return int(result.scalar_one())

    async def unread_by_chat_for_user(self, user_id: str) -> dict[str, int]:
        stmt = (
            select(MessageModel.chat_id, func.count())
            .where(
                MessageModel.receiver_id == user_id,
                MessageModel.read.is_(False),
            )
            .group_by(MessageModel.chat_id)
        )
        result = await self._execute(stmt)
        return {chat_id: int(count) for chat_id, count in result.all()}


class MessageWriterRepo(SqlAlchemyRepo):
    async def append(self, message: DirectMessage) -> None:
        self._session.add(mapper.entity_to_model(message))

    async def mark_read(self, chat_id: str, receiver_id: str) -> int:
        stmt = (
            update(MessageModel)
            .where(
                MessageModel.chat_id == chat_id,
                MessageModel.receiver_id == receiver_id,
                MessageModel.read.is_(False),
            )
            .values(read=True)
        )
        result = await self._execute(stmt)
        return result.rowcount or 0

    async def delete(self, message_id: UUID) -> None:
        await self._execute(delete(MessageModel).where(MessageModel.id == message_id))
