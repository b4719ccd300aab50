"""Notification fan-out and read-state tracking."""

from __future__ import annotations

import logging

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from stackit.core.errors import ForbiddenError, NotFoundError
from stackit.models import Notification, NotificationType

logger = logging.getLogger(__name__)


def notify_answer_posted(
    db: Session,
    *,
    recipient_id: int,
    question_id: int,
    question_title: str,
    answer_id: int,
    answerer_id: int,
    answerer_name: str,
) -> Notification | None:
    """Tell the asker that someone answered their question.

    Nothing is sent when people answer their own question. This is a
    best-effort side effect: any failure is rolled back and logged, and the
    already committed answer is left untouched. Callers pass plain values so
    that no expired instance has to be reloaded here.
    """
    if answerer_id == recipient_id:
        return None

    try:
        notification = Notification(
            user_id=recipient_id,
            type=NotificationType.ANSWER,
            message=f'{answerer_name} answered your question "{question_title}"',
            question_id=question_id,
            answer_id=answer_id,
            is_read=False,
        )
        db.add(notification)
        db.commit()
        db.refresh(notification)
    except Exception:  # noqa: BLE001 - fan-out must never fail the answer
        db.rollback()
        logger.exception(
            "Failed to notify user %s about answer %s on question %s",
            recipient_id,
            answer_id,
            question_id,
        )
        return None

    return notification


def list_notifications(
    db: Session,
    user_id: int,
    *,
    unread_only: bool = False,
    limit: int = 50,
) -> list[Notification]:
    """Return the user's notifications, newest first."""
    stmt = select(Notification).where(Notification.user_id == user_id)
    if unread_only:
        stmt = stmt.where(Notification.is_read.is_(False))
    stmt = stmt.order_by(Notification.created_at.desc(), Notification.id.desc()).limit(limit)
    return list(db.scalars(stmt))


def unread_count(db: Session, user_id: int) -> int:
    """Return how many of the user's notifications are unread."""
    return db.execute(
        select(func.count())
        .select_from(Notification)
        .where(Notification.user_id == user_id, Notification.is_read.is_(False))
    ).scalar_one()


def mark_read(db: Session, notification_id: int, user_id: int) -> Notification:
    """Mark one notification as read. Marking it again is a no-op.

    Raises:
        NotFoundError: If the notification does not exist
        ForbiddenError: If it belongs to another user
    """
    notification = db.get(Notification, notification_id)
    if notification is None:
        raise NotFoundError("Notification not found")
    if notification.user_id != user_id:
        raise ForbiddenError("You can only update your own notifications", code="not_owner")

    if not notification.is_read:
        notification.is_read = True
        db.commit()
        db.refresh(notification)
    return notification


def mark_all_read(db: Session, user_id: int) -> int:
    """Mark every unread notification of the user as read.

    Returns:
        Number of notifications that changed state
    """
    result = db.execute(
        update(Notification)
        .where(Notification.user_id == user_id, Notification.is_read.is_(False))
        .values(is_read=True)
        .execution_options(synchronize_session=False)
    )
    db.commit()
    return result.rowcount
