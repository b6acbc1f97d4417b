from __future__ import annotations

from typing import Any, Protocol


class TurnCredentialsProvider(Protocol):
    async def fetch(self) -> list[dict[str, Any]]:
        """Return the vendor's ICE server list. May raise on any upstream failure."""
        ...
