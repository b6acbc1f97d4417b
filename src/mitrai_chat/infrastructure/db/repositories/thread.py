from __future__ import annotations

from datetime import datetime

from sqlalchemy import or_, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert

from mitrai_chat.domain.entities.thread import ChatThread
from mitrai_chat.infrastructure.db.mappers import thread as mapper
from mitrai_chat.infrastructure.db.models.thread import ChatThreadModel
from mitrai_chat.infrastructure.db.repositories._base import SqlAlchemyRepo


class ThreadReaderRepo(SqlAlchemyRepo):
    async def get_by_chat_id(self, chat_id: str) -> ChatThread | None:
        result = await self._execute(
            select(ChatThreadModel).where(ChatThreadModel.chat_id == chat_id)
        )
        model = result.scalar_one_or_none()
        return mapper.model_to_entity(model) if model else None

    async def list_for_user(self, user_id: str, *, limit: int = 50) -> list[ChatThread]:
        stmt = (
            select(ChatThreadModel)
            .where(
                or_(
                    ChatThreadModel.user1_id == user_id,
                    ChatThreadModel.user2_id == user_id,
                )
            )
            .order_by(ChatThreadModel.last_message_at.desc(), ChatThreadModel.chat_id)
            .limit(limit)
        )
        result = await self._execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]


class ThreadWriterRepo(SqlAlchemyRepo):
    async def upsert_last_message(
        self,
        chat_id: str,
        user1_id: str,
        user2_id: str,
        last_message: str,
        last_message_at: datetime,
    ) -> None:
        stmt = (
            pg_insert(ChatThreadModel)
            .values(
                chat_id=chat_id,
                user1_id=user1_id,
                user2_id=user2_id,
                last_message=last_message,
                last_message_at=last_message_at,
            )
            .on_conflict_do_update(
                index_elements=[ChatThreadModel.chat_id],
                set_={
                    "last_message": last_message,
                    "last_message_at": last_message_at,
                },
            )
        )
        await self._execute(stmt)

    async def set_last_message(
        self,
        chat_id: str,
        last_message: str,
        last_message_at: datetime,
    ) -> None:
        stmt = (
            update(ChatThreadModel)
            .where(ChatThreadModel.chat_id == chat_id)
            .values(last_message=last_message, last_message_at=last_message_at)
        )
        await self._execute(stmt)

    async def set_display_name(self, chat_id: str, user_id: str, name: str) -> None:
        for id_col, name_col in (
            (ChatThreadModel.user1_id, "user1_name"),
            (ChatThreadModel.user2_id, "user2_name"),
        ):
            stmt = (
                update(ChatThreadModel)
                .where(ChatThreadModel.chat_id == chat_id, id_col == user_id)
                .values({name_col: name})
            )
            await self._execute(stmt)
