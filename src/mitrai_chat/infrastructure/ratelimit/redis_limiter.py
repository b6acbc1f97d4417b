"""Fixed-window request counter stored in Redis."""
from __future__ import annotations

import logging

import redis.asyncio as aioredis
from redis.exceptions import RedisError

logger = logging.getLogger(__name__)


class RedisRateLimiter:
    """Implements application.ports.rate_limit.RateLimiter.

    ``INCR`` and ``EXPIRE NX`` go out in one MULTI/EXEC, so a counter never
    exists without a TTL. ``NX`` keeps later hits from sliding the window and
    re-arms a key that somehow lost its TTL.
    """

    def __init__(self, redis: aioredis.Redis, prefix: str = "ratelimit") -> None:
        self._redis = redis
        self._prefix = prefix

    async def hit(self, key: str, limit: int, window_seconds: int) -> bool:
        redis_key = f"{self._prefix}:{key}"
        try:
            async with self._redis.pipeline(transaction=True) as pipe:
                pipe.incr(redis_key)
                pipe.expire(redis_key, window_seconds, nx=True)
                count, _ = await pipe.execute()
        except RedisError:
            # Limiter outage must not block chat traffic
            logger.warning("Rate limiter unavailable, allowing key=%s", key, exc_info=True)
            return True
        return int(count) <= limit
