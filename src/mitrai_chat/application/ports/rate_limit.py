from __future__ import annotations

from typing import Protocol


class RateLimiter(Protocol):
    async def hit(self, key: str, limit: int, window_seconds: int) -> bool:
        """Count one request against ``key``. False once ``limit`` is exceeded in the window."""
        ...
