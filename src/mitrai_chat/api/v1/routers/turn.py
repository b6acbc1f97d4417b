from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from mitrai_chat.api.deps import TurnProviderDep
from mitrai_chat.api.v1.schemas.turn import TurnCredentialsResponse
from mitrai_chat.config import settings
from mitrai_chat.services import turn_service

router = APIRouter(prefix="/api/turn-credentials", tags=["turn"])


@router.get("", response_model=TurnCredentialsResponse)
async def get_turn_credentials(provider: TurnProviderDep) -> JSONResponse:
    """Relay credentials for WebRTC. Always 200; an empty list means "no TURN"."""
    servers = await turn_service.get_ice_servers(provider, settings.TURN_TIMEOUT_SECONDS)
    if not servers:
        return JSONResponse(content={"servers": []})
    return JSONResponse(
        content={"servers": servers},
        headers={"Cache-Control": f"public, max-age={settings.TURN_CACHE_MAX_AGE}"},
    )
