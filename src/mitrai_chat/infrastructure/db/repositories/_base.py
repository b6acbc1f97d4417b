from __future__ import annotations

from typing import Any

from sqlalchemy import Executable, Result
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from mitrai_chat.application.exceptions import StorageError


class SqlAlchemyRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _execute(self, stmt: Executable) -> Result[Any]:
        try:
            return await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StorageError(f"{type(self).__name__}: {exc}") from exc
