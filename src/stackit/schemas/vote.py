"""Vote-related Pydantic schemas."""

from pydantic import Field

from stackit.models.vote import VoteType
from stackit.schemas.common import CamelModel


class VoteCreate(CamelModel):
    """Schema for casting a vote on an answer."""

    answer_id: int
    vote_type: VoteType = Field(..., description="'up' or 'down'")


class VoteResponse(CamelModel):
    """Outcome of a vote call."""

    message: str
    votes: int = Field(..., description="Net score of the answer after this vote")
    vote_type: VoteType | None = Field(None, description="Caller's vote after this call")


class UserVoteResponse(CamelModel):
    """The caller's current vote on an answer."""

    vote_type: VoteType | None = None
