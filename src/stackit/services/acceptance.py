"""Acceptance workflow: the asker marks one answer as the solution."""

from __future__ import annotations

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from stackit.core.errors import ForbiddenError, NotFoundError
from stackit.models import Answer, Question

logger = logging.getLogger(__name__)


def accept_answer(
    db: Session,
    *,
    answer_id: int,
    requester_id: int,
    question_id: int | None = None,
) -> Answer:
    """Mark ``answer_id`` as the accepted answer of its question.

    The question row is locked for the duration of the transaction, every other
    answer of the question is unaccepted, the target is accepted and the
    question's pointer is moved, all in one commit. Accepting a different
    answer later supersedes the earlier choice.

    Args:
        db: Database session
        answer_id: Answer to accept
        requester_id: Authenticated user making the request
        question_id: Optional question the answer is expected to belong to

    Returns:
        The accepted answer

    Raises:
        NotFoundError: If the answer or question is missing, or the answer
            belongs to a different question than ``question_id``
        ForbiddenError: If the requester did not ask the question
    """
    answer = db.get(Answer, answer_id)
    if answer is None or (question_id is not None and answer.question_id != question_id):
        raise NotFoundError("Answer not found")

    question = db.execute(
        select(Question).where(Question.id == answer.question_id).with_for_update()
    ).scalar_one_or_none()
    if question is None:
        raise NotFoundError("Question not found")

    if question.author_id != requester_id:
        raise ForbiddenError("Only question owner can accept answers", code="not_owner")

    owning_question_id = question.id
    previous_id = question.accepted_answer_id
    try:
        db.execute(
            update(Answer)
            .where(Answer.question_id == question.id, Answer.id != answer.id)
            .values(is_accepted=False)
        )
        answer.is_accepted = True
        question.accepted_answer_id = answer.id
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    if previous_id is not None and previous_id != answer_id:
        logger.info(
            "Question %s: accepted answer changed from %s to %s",
            owning_question_id,
            previous_id,
            answer_id,
        )

    db.refresh(answer)
    return answer
