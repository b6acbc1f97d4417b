from __future__ import annotations

from fastapi import APIRouter, Query, Request

from mitrai_chat.api.deps import UoWDep
from mitrai_chat.api.v1.schemas.common import SuccessResponse, parse_body, read_json
from mitrai_chat.api.v1.schemas.notification import (
    MarkNotificationReadRequest,
    NotificationResponse,
    NotificationsResponse,
)
from mitrai_chat.application.exceptions import ValidationError
from mitrai_chat.services import notification_service

router = APIRouter(prefix="/api/notifications", tags=["notifications"])

MISSING_MARK_FIELDS = "Missing userId or notificationId"


@router.get("", response_model=NotificationsResponse)
async def list_notifications(
    uow: UoWDep,
    user_id: str | None = Query(None, alias="userId"),
    limit: int = Query(100, ge=1, le=200),
) -> NotificationsResponse:
    if not user_id:
        raise ValidationError("userId required")
    items = await notification_service.list_notifications(user_id, uow, limit=limit)
    return NotificationsResponse(
        data=[NotificationResponse.model_validate(n) for n in items],
    )


# POST is what existing clients send; PATCH is kept for REST-style callers.
@router.post("", response_model=SuccessResponse)
@router.patch("", response_model=SuccessResponse)
async def mark_notification_read(request: Request, uow: UoWDep) -> SuccessResponse:
    body = parse_body(MarkNotificationReadRequest, await read_json(request), MISSING_MARK_FIELDS)
    await notification_service.mark_read(body.user_id, body.notification_id, uow)
    return SuccessResponse()
