"""Eligibility rules that gate voting on prior contribution."""

from stackit.core.errors import ForbiddenError
from stackit.models import User

# Fixed policy: a member must have posted this many answers before voting.
MIN_ANSWERS_TO_VOTE = 2

INSUFFICIENT_CONTRIBUTION = "insufficient_contribution"


def can_vote(user: User) -> bool:
    """Return True if ``user`` has answered enough questions to vote."""
    return user.answer_count >= MIN_ANSWERS_TO_VOTE


def ensure_can_vote(user: User) -> None:
    """Raise ``ForbiddenError`` unless ``user`` passes the contribution gate."""
    if not can_vote(user):
        raise ForbiddenError(
            "Insufficient contribution: you must answer at least "
            f"{MIN_ANSWERS_TO_VOTE} questions before voting",
            code=INSUFFICIENT_CONTRIBUTION,
        )
