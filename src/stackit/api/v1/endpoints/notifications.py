"""Notification endpoints for the StackIt API."""

from typing import Annotated

from fastapi import APIRouter, Query

from stackit.api.v1.dependencies import CurrentUserDep, SessionDep
from stackit.core.settings import settings
from stackit.models import Notification
from stackit.schemas.common import MessageResponse
from stackit.schemas.notification import (
    MarkAllReadResponse,
    NotificationResponse,
    UnreadCountResponse,
)
from stackit.services import notifications as notification_service

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=list[NotificationResponse])
async def list_notifications(
    current_user: CurrentUserDep,
    db: SessionDep,
    unread_only: Annotated[bool, Query(alias="unreadOnly")] = False,
) -> list[Notification]:
    """List the current user's notifications, newest first."""
    return notification_service.list_notifications(
        db,
        current_user.id,
        unread_only=unread_only,
        limit=settings.notifications_page_size,
    )


@router.get("/unread-count", response_model=UnreadCountResponse)
async def get_unread_count(current_user: CurrentUserDep, db: SessionDep) -> UnreadCountResponse:
    return UnreadCountResponse(count=notification_service.unread_count(db, current_user.id))


@router.patch("/read-all", response_model=MarkAllReadResponse)
async def mark_all_read(current_user: CurrentUserDep, db: SessionDep) -> MarkAllReadResponse:
    """Mark every notification of the current user as read."""
    updated = notification_service.mark_all_read(db, current_user.id)
    return MarkAllReadResponse(message="All notifications marked as read", updated=updated)


@router.patch("/{notification_id}/read", response_model=MessageResponse)
async def mark_read(
    notification_id: int,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> MessageResponse:
    """Mark a single notification as read."""
    notification_service.mark_read(db, notification_id, current_user.id)
    return MessageResponse(message="Notification marked as read")
