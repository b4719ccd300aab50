# src/stackit/models/question.py
"""SQLAlchemy models for questions and their tags."""

from __future__ import annotations

from sqlalchemy import ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from stackit.db.session import Base
from stackit.models.mixins import TimestampMixin


class Question(TimestampMixin, Base):
    """A question asked by a user.

    ``author`` is a snapshot of the asker's username taken at creation time,
    not a live reference.
    """

    __tablename__ = "question"
    __table_args__ = (
        Index("ix_question_created_at", "created_at"),
        Index("ix_question_author_id", "author_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(150), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user_account.id"),
        nullable=False,
    )
    author: Mapped[str] = mapped_column(String(30), nullable=False)

    # Plain integer; answer.question_id already points the other way.
    accepted_answer_id: Mapped[int | None] = mapped_column(Integer, nullable=True)

    answer_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    votes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    views: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    tag_rows: Mapped[list[QuestionTag]] = relationship(
        "QuestionTag",
        back_populates="question",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="QuestionTag.name",
    )

    @property
    def tags(self) -> list[str]:
        """Return the tag names attached to this question."""
        return [row.name for row in self.tag_rows]


class QuestionTag(Base):
    """One lowercase tag attached to a question."""

    __tablename__ = "question_tag"
    __table_args__ = (Index("ix_question_tag_name", "name"),)

    # Composite primary key keeps the tag set free of duplicates.
    question_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("question.id", ondelete="CASCADE"),
        primary_key=True,
    )
    name: Mapped[str] = mapped_column(String(50), primary_key=True)

    question: Mapped[Question] = relationship("Question", back_populates="tag_rows")
