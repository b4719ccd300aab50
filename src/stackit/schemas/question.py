"""Question-related Pydantic schemas."""

import enum
from datetime import datetime

from pydantic import Field, field_validator

from stackit.schemas.common import CamelModel


class QuestionSort(str, enum.Enum):
    """Supported orderings for question listings."""

    NEWEST = "newest"
    OLDEST = "oldest"
    MOST_ANSWERS = "most-answers"
    UNANSWERED = "unanswered"


class QuestionFilter(CamelModel):
    """Search, tag and sort criteria for listing questions."""

    search: str | None = None
    tag: str | None = None
    sort_by: QuestionSort = QuestionSort.NEWEST

    @field_validator("search", "tag")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        """Treat empty query parameters as absent."""
        if v is None:
            return None
        v = v.strip()
        return v or None


class QuestionCreate(CamelModel):
    """Schema for asking a new question."""

    title: str = Field(..., min_length=1, max_length=150)
    description: str = Field(..., min_length=1)
    tags: list[str] = Field(default_factory=list, max_length=10)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Title must not be blank")
        return v

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, v: list[str]) -> list[str]:
        """Lowercase, trim and de-duplicate tags, dropping empty ones."""
        seen: dict[str, None] = {}
        for tag in v:
            name = tag.strip().lower()
            if not name:
                continue
            if len(name) > 50:
                raise ValueError("Tags must be at most 50 characters")
            seen.setdefault(name, None)
        return list(seen)


class QuestionResponse(CamelModel):
    """Schema for question information returned by the API."""

    id: int
    title: str
    description: str
    tags: list[str]
    author_id: int
    author: str
    accepted_answer_id: int | None
    answer_count: int
    votes: int
    views: int
    created_at: datetime
    updated_at: datetime
