"""Fail-open TURN credential lookup.

Every outcome is a list: the vendor's servers, or an empty list when the
vendor is unconfigured, slow, failing or returns nothing usable.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any

from mitrai_chat.application.exceptions import UpstreamError
from mitrai_chat.application.ports.turn import TurnCredentialsProvider

logger = logging.getLogger(__name__)


async def get_ice_servers(
    provider: TurnCredentialsProvider | None,
    timeout: float,
) -> list[dict[str, Any]]:
    if provider is None:
        logger.info("[TURN] No vendor key configured, returning no servers")
        return []

    try:
        servers = await asyncio.wait_for(provider.fetch(), timeout=timeout)
    except TimeoutError:
        logger.warning("[TURN] Vendor did not answer within %.1fs", timeout)
        return []
    except UpstreamError as exc:
        logger.warning("[TURN] %s", exc.detail)
        return []
    except Exception as exc:  # noqa: BLE001
        logger.warning("[TURN] Vendor request failed: %r", exc)
        return []

    if not servers:
        logger.info("[TURN] Vendor returned an empty server list")
        return []

    logger.info("[TURN] Fetched %d servers from vendor", len(servers))
    return servers
