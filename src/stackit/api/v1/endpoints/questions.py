"""Question-related endpoints for the StackIt API."""

from typing import Annotated

from fastapi import APIRouter, Query, status

from stackit.api.v1.dependencies import CurrentUserDep, SessionDep
from stackit.core.settings import settings
from stackit.models import Question
from stackit.schemas.common import MessageResponse
from stackit.schemas.question import QuestionCreate, QuestionFilter, QuestionResponse, QuestionSort
from stackit.services import questions as question_service

router = APIRouter(prefix="/questions", tags=["questions"])


@router.get("", response_model=list[QuestionResponse])
async def list_questions(
    db: SessionDep,
    search: Annotated[str | None, Query(description="Substring of title or description")] = None,
    tag: Annotated[str | None, Query(description="Only questions carrying this tag")] = None,
    sort_by: Annotated[QuestionSort, Query(alias="sortBy")] = QuestionSort.NEWEST,
) -> list[Question]:
    """List questions with optional search, tag filter and ordering.

    Args:
        db: Database session
        search: Case-insensitive text matched against title and description
        tag: Exact tag to filter on
        sort_by: newest, oldest, most-answers or unanswered

    Returns:
        Matching questions in the requested order
    """
    criteria = QuestionFilter(search=search, tag=tag, sort_by=sort_by)
    return question_service.list_questions(db, criteria)


@router.post("", response_model=QuestionResponse, status_code=status.HTTP_201_CREATED)
async def create_question(
    question_data: QuestionCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Question:
    """Ask a new question as the authenticated user."""
    return question_service.create_question(db, current_user, question_data)


@router.get("/{question_id}", response_model=QuestionResponse)
async def get_question(question_id: int, db: SessionDep) -> Question:
    """Get a specific question by ID."""
    return question_service.get_question(db, question_id)


@router.patch("/{question_id}/views", response_model=MessageResponse)
async def increment_views(question_id: int, db: SessionDep) -> MessageResponse:
    """Count one more view of a question."""
    question_service.increment_views(db, question_id)
    return MessageResponse(message="Views incremented")


@router.get("/{question_id}/related", response_model=list[QuestionResponse])
async def get_related_questions(
    question_id: int,
    db: SessionDep,
    limit: Annotated[int | None, Query(ge=1, le=20)] = None,
) -> list[Question]:
    """Get the most viewed questions that share a tag with this one."""
    return question_service.related_questions(
        db,
        question_id,
        limit=limit or settings.related_questions_limit,
    )
