from __future__ import annotations

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from mitrai_chat.infrastructure.ratelimit.redis_limiter import RedisRateLimiter


class _FakePipeline:
    """Buffers commands and applies them all or none, like MULTI/EXEC."""

    def __init__(self, redis: _FakeRedis) -> None:
        self._redis = redis
        self._ops: list[tuple] = []

    async def __aenter__(self) -> _FakePipeline:
        return self

    async def __aexit__(self, *exc) -> None:
        self._ops.clear()

    def incr(self, key: str) -> _FakePipeline:
        self._ops.append(("incr", key))
        return self

    def expire(self, key: str, seconds: int, nx: bool = False) -> _FakePipeline:
        self._ops.append(("expire", key, seconds, nx))
        return self

    async def execute(self) -> list:
        redis = self._redis
        if redis.broken:
            raise RedisConnectionError("redis down")
        if any(op[0] == "expire" for op in self._ops) and redis.failing_expires:
            redis.failing_expires -= 1
            raise RedisConnectionError("connection lost during EXEC")

        results: list = []
        for op in self._ops:
            if op[0] == "incr":
                redis.counters[op[1]] = redis.counters.get(op[1], 0) + 1
                results.append(redis.counters[op[1]])
            else:
                _, key, seconds, nx = op
                if nx and key in redis.ttls:
                    results.append(False)
                else:
                    redis.ttls[key] = seconds
                    results.append(True)
        return results


class _FakeRedis:
    def __init__(self, *, broken: bool = False, failing_expires: int = 0) -> None:
        self.counters: dict[str, int] = {}
        self.ttls: dict[str, int] = {}
        self.broken = broken
        self.failing_expires = failing_expires
        self.transactions: list[bool] = []

    def pipeline(self, transaction: bool = True) -> _FakePipeline:
        self.transactions.append(transaction)
        return _FakePipeline(self)

    def elapse_window(self, key: str) -> None:
        """Drops keys that carry a TTL, as Redis does when the window ends."""
        if key in self.ttls:
            del self.ttls[key]
            self.counters.pop(key, None)


@pytest.mark.asyncio
async def test_allows_up_to_limit_then_blocks():
    redis = _FakeRedis()
    limiter = RedisRateLimiter(redis)  # type: ignore[arg-type]

    results = [await limiter.hit("chat:alice", 3, 60) for _ in range(4)]

    assert results == [True, True, True, False]
    assert redis.ttls == {"ratelimit:chat:alice": 60}
    assert all(redis.transactions)


@pytest.mark.asyncio
async def test_keys_are_independent():
    limiter = RedisRateLimiter(_FakeRedis())  # type: ignore[arg-type]

    assert await limiter.hit("chat:alice", 1, 60) is True
    assert await limiter.hit("chat:bob", 1, 60) is True
    assert await limiter.hit("chat:alice", 1, 60) is False


@pytest.mark.asyncio
async def test_redis_outage_allows_request():
    limiter = RedisRateLimiter(_FakeRedis(broken=True))  # type: ignore[arg-type]

    assert await limiter.hit("chat:alice", 1, 60) is True


@pytest.mark.asyncio
async def test_failed_expire_never_leaves_counter_without_ttl():
    redis = _FakeRedis(failing_expires=1)
    limiter = RedisRateLimiter(redis)  # type: ignore[arg-type]
    key = "ratelimit:chat:alice"

    results = [await limiter.hit("chat:alice", 2, 60) for _ in range(4)]

    assert results == [True, True, True, False]
    assert redis.ttls == {key: 60}

    redis.elapse_window(key)
    assert await limiter.hit("chat:alice", 2, 60) is True


@pytest.mark.asyncio
async def test_counter_without_ttl_is_rearmed():
    redis = _FakeRedis()
    redis.counters["ratelimit:chat:alice"] = 99
    limiter = RedisRateLimiter(redis)  # type: ignore[arg-type]

    assert await limiter.hit("chat:alice", 2, 60) is False
    assert redis.ttls == {"ratelimit:chat:alice": 60}

    redis.elapse_window("ratelimit:chat:alice")
    assert await limiter.hit("chat:alice", 2, 60) is True
