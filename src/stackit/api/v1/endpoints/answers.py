"""Answer-related endpoints for the StackIt API."""

from fastapi import APIRouter, status

from stackit.api.v1.dependencies import CurrentUserDep, SessionDep
from stackit.models import Answer
from stackit.schemas.answer import AnswerCreate, AnswerResponse
from stackit.schemas.common import MessageResponse
from stackit.services import acceptance
from stackit.services import answers as answer_service

router = APIRouter(prefix="/answers", tags=["answers"])


@router.get("/question/{question_id}", response_model=list[AnswerResponse])
async def list_answers(question_id: int, db: SessionDep) -> list[Answer]:
    """Get the answers posted on a question, accepted answer first."""
    return answer_service.list_answers(db, question_id)


@router.post("", response_model=AnswerResponse, status_code=status.HTTP_201_CREATED)
async def create_answer(
    answer_data: AnswerCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Answer:
    """Answer a question as the authenticated user.

    Raises:
        NotFoundError: If the question does not exist
    """
    return answer_service.create_answer(db, current_user, answer_data)


@router.patch("/{answer_id}/accept", response_model=MessageResponse)
async def accept_answer(
    answer_id: int,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> MessageResponse:
    """Accept an answer. Only the author of the question may do this."""
    acceptance.accept_answer(db, answer_id=answer_id, requester_id=current_user.id)
    return MessageResponse(message="Answer accepted")
