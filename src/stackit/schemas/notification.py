"""Notification-related Pydantic schemas."""

from datetime import datetime

from stackit.models.notification import NotificationType
from stackit.schemas.common import CamelModel


class NotificationResponse(CamelModel):
    """Schema for notifications returned by the API."""

    id: int
    user_id: int
    type: NotificationType
    message: str
    question_id: int | None = None
    answer_id: int | None = None
    is_read: bool
    created_at: datetime


class UnreadCountResponse(CamelModel):
    count: int


class MarkAllReadResponse(CamelModel):
    message: str
    updated: int
