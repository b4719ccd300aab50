"""Vote ledger for answers.

A user holds at most one vote per answer. Casting the same direction twice
retracts the vote; casting the opposite direction flips it. Every change to a
``Vote`` row is paired with a SQL-side increment of ``Answer.votes`` inside the
same transaction, keeping the counter equal to the sum of the vote rows.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from stackit.core.errors import ConflictError, ForbiddenError, NotFoundError
from stackit.core.settings import settings
from stackit.models import Answer, User, Vote, VoteType
from stackit.services.contribution import ensure_can_vote

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VoteOutcome:
    """Result of a single ``cast_vote`` call.

    Attributes:
        delta: Change applied to the answer's score.
        votes: Score of the answer after the change.
        vote_type: The caller's vote after the call, or None if retracted.
    """

    delta: int
    votes: int
    vote_type: VoteType | None


def vote_delta(existing: VoteType | None, requested: VoteType) -> tuple[int, VoteType | None]:
    """Return ``(score delta, resulting vote)`` for casting ``requested``.

    A new vote moves the score by its weight, a repeated vote retracts it and
    an opposite vote swings the score by twice the new weight.
    """
    if existing is None:
        return requested.weight, requested
    if existing is requested:
        return -requested.weight, None
    return 2 * requested.weight, requested


def _get_answer_or_404(db: Session, answer_id: int) -> Answer:
    answer = db.get(Answer, answer_id)
    if answer is None:
        raise NotFoundError("Answer not found")
    return answer


def _find_vote(db: Session, user_id: int, answer_id: int) -> Vote | None:
    return db.execute(
        select(Vote)
        .where(Vote.user_id == user_id, Vote.answer_id == answer_id)
        .with_for_update()
    ).scalar_one_or_none()


def _apply_vote(
    db: Session,
    *,
    user_id: int,
    answer_id: int,
    vote_type: VoteType,
) -> tuple[int, VoteType | None]:
    existing = _find_vote(db, user_id, answer_id)
    delta, result = vote_delta(existing.type if existing else None, vote_type)

    if existing is None:
        db.add(Vote(user_id=user_id, answer_id=answer_id, type=vote_type))
    elif result is None:
        db.delete(existing)
    else:
        existing.type = result
    db.flush()

    db.execute(
        update(Answer)
        .where(Answer.id == answer_id)
        .values(votes=Answer.votes + delta)
    )
    return delta, result


def cast_vote(db: Session, user: User, answer_id: int, vote_type: VoteType) -> VoteOutcome:
    """Cast, retract or flip ``user``'s vote on an answer.

    Args:
        db: Database session
        user: Authenticated voter
        answer_id: Target answer
        vote_type: Requested direction

    Returns:
        The applied delta, the answer's new score and the caller's resulting vote.

    Raises:
        ForbiddenError: If the user has not contributed enough answers, or
            votes on their own answer while self-voting is disabled.
        NotFoundError: If the answer does not exist.
        ConflictError: If a concurrent insert kept winning the unique
            constraint for every attempt.
    """
    ensure_can_vote(user)
    user_id = user.id

    for attempt in range(1, settings.vote_max_attempts + 1):
        answer = _get_answer_or_404(db, answer_id)
        if not settings.allow_self_vote and answer.author_id == user_id:
            raise ForbiddenError("You cannot vote on your own answer", code="self_vote")

        try:
            delta, result = _apply_vote(
                db,
                user_id=user_id,
                answer_id=answer_id,
                vote_type=vote_type,
            )
            db.commit()
        except IntegrityError:
            # Another request inserted the same (user, answer) vote first.
            # Roll back and replay against the row that is now visible.
            db.rollback()
            logger.warning(
                "Vote insert conflict for user %s on answer %s (attempt %d)",
                user_id,
                answer_id,
                attempt,
            )
            continue
        except SQLAlchemyError:
            db.rollback()
            raise

        votes = db.execute(select(Answer.votes).where(Answer.id == answer_id)).scalar_one()
        logger.debug(
            "User %s voted %s on answer %s: delta=%d votes=%d",
            user_id,
            vote_type.value,
            answer_id,
            delta,
            votes,
        )
        return VoteOutcome(delta=delta, votes=votes, vote_type=result)

    raise ConflictError("Vote could not be recorded, please try again", code="vote_conflict")


def get_user_vote(db: Session, user_id: int, answer_id: int) -> VoteType | None:
    """Return the user's current vote on an answer, if any."""
    return db.execute(
        select(Vote.type).where(Vote.user_id == user_id, Vote.answer_id == answer_id)
    ).scalar_one_or_none()
