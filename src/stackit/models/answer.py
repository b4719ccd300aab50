# src/stackit/models/answer.py
"""SQLAlchemy model for answers to questions."""

from sqlalchemy import Boolean, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from stackit.db.session import Base
from stackit.models.mixins import TimestampMixin


class Answer(TimestampMixin, Base):
    """An answer posted on a question.

    ``votes`` is the net score derived from :class:`~stackit.models.vote.Vote`
    rows and is only changed by the vote ledger. ``is_accepted`` is only
    changed by the acceptance workflow.
    """

    __tablename__ = "answer"
    __table_args__ = (
        Index("ix_answer_question_id", "question_id"),
        Index("ix_answer_author_id", "author_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    question_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("question.id", ondelete="CASCADE"),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user_account.id"),
        nullable=False,
    )
    author: Mapped[str] = mapped_column(String(30), nullable=False)
    votes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_accepted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
