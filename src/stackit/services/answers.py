"""Answer creation and listing."""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from stackit.core.errors import NotFoundError
from stackit.models import Answer, Question, User
from stackit.schemas.answer import AnswerCreate
from stackit.services.notifications import notify_answer_posted


def list_answers(db: Session, question_id: int) -> list[Answer]:
    """Return a question's answers: accepted first, then by score, then oldest."""
    stmt = (
        select(Answer)
        .where(Answer.question_id == question_id)
        .order_by(
            Answer.is_accepted.desc(),
            Answer.votes.desc(),
            Answer.created_at.asc(),
            Answer.id.asc(),
        )
    )
    return list(db.scalars(stmt))


def create_answer(db: Session, author: User, data: AnswerCreate) -> Answer:
    """Post an answer and keep the cached answer counters in step.

    The answer row and both counter increments (question and author) commit
    together. The asker is notified afterwards on a best-effort basis.

    Raises:
        NotFoundError: If the question does not exist
    """
    question = db.get(Question, data.question_id)
    if question is None:
        raise NotFoundError("Question not found")

    # Commit expires both instances; the fan-out works from these values.
    question_id = question.id
    asker_id = question.author_id
    question_title = question.title
    author_id = author.id
    author_name = author.username

    answer = Answer(
        question_id=question_id,
        content=data.content,
        author_id=author_id,
        author=author_name,
    )
    try:
        db.add(answer)
        db.flush()
        answer_id = answer.id
        db.execute(
            update(Question)
            .where(Question.id == question_id)
            .values(answer_count=Question.answer_count + 1)
        )
        db.execute(
            update(User)
            .where(User.id == author_id)
            .values(answer_count=User.answer_count + 1)
        )
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    notify_answer_posted(
        db,
        recipient_id=asker_id,
        question_id=question_id,
        question_title=question_title,
        answer_id=answer_id,
        answerer_id=author_id,
        answerer_name=author_name,
    )
    db.refresh(answer)
    return answer
