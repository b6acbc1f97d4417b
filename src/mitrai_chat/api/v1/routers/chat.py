from __future__ import annotations

from datetime import datetime
from typing import assert_never

from fastapi import APIRouter, Query, Request

from mitrai_chat.api.deps import ClockDep, RateLimiterDep, UoWDep
from mitrai_chat.api.v1.schemas.chat import (
    DeleteMessageRequest,
    MarkReadBody,
    MarkReadRequest,
    MessageResponse,
    MessagesResponse,
    SendMessageRequest,
    SendMessageResponse,
    ThreadResponse,
    ThreadsResponse,
    UnreadCountResponse,
    parse_chat_action,
)
from mitrai_chat.api.v1.schemas.common import SuccessResponse, parse_body, read_json
from mitrai_chat.application.dto.message import SendMessageDTO
from mitrai_chat.application.exceptions import (
    ForbiddenError,
    RateLimitedError,
    ValidationError,
)
from mitrai_chat.application.ports.clock import Clock
from mitrai_chat.application.ports.rate_limit import RateLimiter
from mitrai_chat.application.uow import UnitOfWork
from mitrai_chat.config import settings
from mitrai_chat.domain.value_objects.enums import ChatAction
from mitrai_chat.services import chat_service

router = APIRouter(prefix="/api/chat", tags=["chat"])


@router.get("", response_model=None)
async def get_chat(
    uow: UoWDep,
    user_id: str | None = Query(None, alias="userId"),
    chat_id: str | None = Query(None, alias="chatId"),
    action: str | None = Query(None),
    limit: int | None = Query(None, ge=1, le=500),
    before: datetime | None = Query(None),
) -> ThreadsResponse | MessagesResponse | UnreadCountResponse:
    if not user_id:
        raise ValidationError("userId required")

    if action == ChatAction.UNREAD:
        count = await chat_service.unread_count(user_id, uow)
        return UnreadCountResponse(unread_count=count)

    if chat_id:
        messages = await chat_service.list_messages(chat_id, uow, limit=limit, before=before)
        return MessagesResponse(
            messages=[MessageResponse.model_validate(m) for m in messages],
        )

    threads = await chat_service.list_threads(user_id, uow)
    return ThreadsResponse(threads=[ThreadResponse.model_validate(t) for t in threads])


@router.post("", response_model=None)
async def post_chat(
    request: Request,
    uow: UoWDep,
    limiter: RateLimiterDep,
    clock: ClockDep,
) -> SendMessageResponse | SuccessResponse:
    body = parse_chat_action(await read_json(request))
    match body:
        case SendMessageRequest():
            return await _send(body, uow, limiter, clock)
        case MarkReadRequest():
            await chat_service.mark_read(body.chat_id, body.user_id, uow)
            return SuccessResponse()
        case _:
            assert_never(body)


@router.patch("", response_model=SuccessResponse)
async def mark_chat_read(request: Request, uow: UoWDep) -> SuccessResponse:
    body = parse_body(MarkReadBody, await read_json(request), "chatId, userId required")
    await chat_service.mark_read(body.chat_id, body.user_id, uow)
    return SuccessResponse()


@router.delete("", response_model=SuccessResponse)
async def delete_message(request: Request, uow: UoWDep, clock: ClockDep) -> SuccessResponse:
    body = parse_body(
        DeleteMessageRequest, await read_json(request), "messageId, userId required",
    )
    deleted = await chat_service.delete_message(body.message_id, body.user_id, uow, clock=clock)
    if not deleted:
        raise ForbiddenError("Could not delete message")
    return SuccessResponse()


async def _send(
    body: SendMessageRequest,
    uow: UnitOfWork,
    limiter: RateLimiter,
    clock: Clock,
) -> SendMessageResponse:
    cmd = SendMessageDTO(
        sender_id=body.sender_id,
        receiver_id=body.receiver_id,
        text=body.text,
        sender_name=body.sender_name,
        receiver_name=body.receiver_name,
    )
    # Rejected sends do not count against the quota.
    chat_service.clean_text(cmd, max_length=settings.MESSAGE_MAX_LENGTH)

    allowed = await limiter.hit(
        f"chat:{body.sender_id}",
        settings.CHAT_RATE_LIMIT,
        settings.CHAT_RATE_WINDOW_SECONDS,
    )
    if not allowed:
        raise RateLimitedError("Too many requests. Please try again later.")

    message = await chat_service.send_message(
        cmd,
        uow,
        clock=clock,
        max_length=settings.MESSAGE_MAX_LENGTH,
        preview_length=settings.NOTIFICATION_PREVIEW_LENGTH,
    )
    return SendMessageResponse(message=MessageResponse.model_validate(message))
