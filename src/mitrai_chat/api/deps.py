"""FastAPI dependency injection helpers."""
from __future__ import annotations

from typing import Annotated, AsyncIterator

from fastapi import Depends, Request

from mitrai_chat.application.ports.clock import Clock, SystemClock
from mitrai_chat.application.ports.rate_limit import RateLimiter
from mitrai_chat.application.ports.turn import TurnCredentialsProvider
from mitrai_chat.config import settings
from mitrai_chat.infrastructure.db.session import AsyncSessionLocal
from mitrai_chat.infrastructure.db.uow import SqlAlchemyUoW
from mitrai_chat.infrastructure.ratelimit.redis_limiter import RedisRateLimiter
from mitrai_chat.infrastructure.turn.metered import MeteredTurnClient


async def get_uow() -> AsyncIterator[SqlAlchemyUoW]:
    async with AsyncSessionLocal() as session:
        uow = SqlAlchemyUoW(session)
        try:
            yield uow
        finally:
            await session.close()


UoWDep = Annotated[SqlAlchemyUoW, Depends(get_uow)]


def get_rate_limiter(request: Request) -> RateLimiter:
    return RedisRateLimiter(request.app.state.redis)


RateLimiterDep = Annotated[RateLimiter, Depends(get_rate_limiter)]


def get_clock() -> Clock:
    return SystemClock()


ClockDep = Annotated[Clock, Depends(get_clock)]


def get_turn_provider() -> TurnCredentialsProvider | None:
    if not settings.METERED_SECRET_KEY:
        return None
    return MeteredTurnClient(
        settings.turn_credentials_url,
        settings.METERED_SECRET_KEY,
        settings.TURN_TIMEOUT_SECONDS,
    )


TurnProviderDep = Annotated[TurnCredentialsProvider | None, Depends(get_turn_provider)]
