"""Answer-related Pydantic schemas."""

from datetime import datetime

from pydantic import Field

from stackit.schemas.common import CamelModel


class AnswerCreate(CamelModel):
    """Schema for posting an answer."""

    question_id: int
    content: str = Field(..., min_length=1, max_length=20000)


class AnswerResponse(CamelModel):
    """Schema for answer information returned by the API."""

    id: int
    question_id: int
    content: str
    author_id: int
    author: str
    votes: int
    is_accepted: bool
    created_at: datetime
    updated_at: datetime
