from __future__ import annotations

from typing import Any, TypeVar

import pydantic
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from starlette.requests import Request

from mitrai_chat.application.exceptions import ValidationError

M = TypeVar("M", bound=BaseModel)


class CamelModel(BaseModel):
    """JSON is camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorResponse(BaseModel):
    error: str


class SuccessResponse(BaseModel):
    success: bool = True


def parse_body(model: type[M], payload: Any, required_message: str) -> M:
    """Validate a decoded JSON body, collapsing pydantic errors into one 400 message."""
    if not isinstance(payload, dict):
        raise ValidationError("Invalid JSON body")
    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise ValidationError(required_message) from exc


async def read_json(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError as exc:
        raise ValidationError("Invalid JSON body") from exc
