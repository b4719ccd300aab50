"""Vote-related endpoints for the StackIt API."""

from fastapi import APIRouter

from stackit.api.v1.dependencies import CurrentUserDep, SessionDep
from stackit.schemas.vote import UserVoteResponse, VoteCreate, VoteResponse
from stackit.services import votes as vote_service

router = APIRouter(prefix="/votes", tags=["votes"])


@router.post("", response_model=VoteResponse)
async def cast_vote(
    vote_data: VoteCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> VoteResponse:
    """Cast, retract or flip a vote on an answer.

    Voting the same direction twice removes the vote; voting the opposite
    direction replaces it.

    Raises:
        ForbiddenError: If the user has not answered enough questions yet
        NotFoundError: If the answer does not exist
    """
    outcome = vote_service.cast_vote(db, current_user, vote_data.answer_id, vote_data.vote_type)
    return VoteResponse(
        message="Vote recorded" if outcome.vote_type else "Vote removed",
        votes=outcome.votes,
        vote_type=outcome.vote_type,
    )


@router.get("/{answer_id}/user", response_model=UserVoteResponse)
async def get_my_vote(
    answer_id: int,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> UserVoteResponse:
    """Get the current user's vote on a specific answer."""
    return UserVoteResponse(vote_type=vote_service.get_user_vote(db, current_user.id, answer_id))
