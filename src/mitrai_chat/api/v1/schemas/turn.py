from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class IceServer(BaseModel):
    urls: str | list[str]
    username: str | None = None
    credential: str | None = None

    model_config = ConfigDict(extra="allow")


class TurnCredentialsResponse(BaseModel):
    servers: list[IceServer]
