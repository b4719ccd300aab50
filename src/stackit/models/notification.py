# src/stackit/models/notification.py
"""SQLAlchemy model for in-app notifications."""

import enum

from sqlalchemy import Boolean, Enum, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from stackit.db.session import Base
from stackit.models.mixins import TimestampMixin


class NotificationType(str, enum.Enum):
    """Kinds of notification a user can receive."""

    ANSWER = "answer"
    COMMENT = "comment"
    MENTION = "mention"
    VOTE = "vote"


class Notification(TimestampMixin, Base):
    """A message addressed to one user. Only ``is_read`` changes after creation."""

    __tablename__ = "notification"
    __table_args__ = (
        Index("ix_notification_user_id_is_read", "user_id", "is_read"),
        Index("ix_notification_created_at", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user_account.id", ondelete="CASCADE"),
        nullable=False,
    )
    type: Mapped[NotificationType] = mapped_column(
        Enum(
            NotificationType,
            name="notification_type",
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
    )
    message: Mapped[str] = mapped_column(Text, nullable=False)
    question_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("question.id", ondelete="SET NULL"),
        nullable=True,
    )
    answer_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("answer.id", ondelete="SET NULL"),
        nullable=True,
    )
    is_read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
