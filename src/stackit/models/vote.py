# src/stackit/models/vote.py
"""Models capturing voting interactions on answers."""

import enum

from sqlalchemy import Enum, ForeignKey, Index, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from stackit.db.session import Base
from stackit.models.mixins import TimestampMixin


class VoteType(str, enum.Enum):
    """Direction of a vote."""

    UP = "up"
    DOWN = "down"

    @property
    def weight(self) -> int:
        """Return +1 for an upvote and -1 for a downvote."""
        return 1 if self is VoteType.UP else -1


class Vote(TimestampMixin, Base):
    """Per-user vote on an answer."""

    __tablename__ = "vote"
    __table_args__ = (
        # A user holds at most one vote per answer.
        UniqueConstraint("user_id", "answer_id", name="uq_vote_user_answer"),
        Index("ix_vote_answer_id", "answer_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user_account.id", ondelete="CASCADE"),
        nullable=False,
    )
    answer_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("answer.id", ondelete="CASCADE"),
        nullable=False,
    )
    type: Mapped[VoteType] = mapped_column(
        Enum(VoteType, name="vote_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
