"""Client for the Metered TURN credentials REST endpoint."""
from __future__ import annotations

import logging
from typing import Any

import httpx

from mitrai_chat.application.exceptions import UpstreamError

logger = logging.getLogger(__name__)


class MeteredTurnClient:
    """Implements application.ports.turn.TurnCredentialsProvider."""

    def __init__(
        self,
        url: str,
        secret_key: str,
        timeout: float,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url
        self._secret_key = secret_key
        self._timeout = timeout
        self._transport = transport

    async def fetch(self) -> list[dict[str, Any]]:
        async with httpx.AsyncClient(
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            resp = await client.get(
                self._url,
                params={"secretKey": self._secret_key},
                headers={"Cache-Control": "no-store"},
            )

        if not resp.is_success:
            raise UpstreamError(
                f"TURN vendor error {resp.status_code}: {resp.text[:200]}",
                status_code=resp.status_code,
            )

        servers = resp.json()
        if not isinstance(servers, list):
            raise UpstreamError("TURN vendor returned a non-list payload")
        logger.debug("Fetched %d TURN servers from %s", len(servers), self._url)
        return servers
