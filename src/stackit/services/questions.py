"""Question creation and the read-side query engine."""

from __future__ import annotations

from sqlalchemy import or_, select, update
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from stackit.core.errors import NotFoundError, ValidationError
from stackit.models import Question, QuestionTag, User
from stackit.schemas.question import QuestionCreate, QuestionFilter, QuestionSort

_LIKE_ESCAPE = "\\"

_ORDERINGS: dict[QuestionSort, tuple[ColumnElement, ...]] = {
    QuestionSort.NEWEST: (Question.created_at.desc(), Question.id.desc()),
    QuestionSort.OLDEST: (Question.created_at.asc(), Question.id.asc()),
    QuestionSort.MOST_ANSWERS: (
        Question.answer_count.desc(),
        Question.created_at.desc(),
        Question.id.desc(),
    ),
    QuestionSort.UNANSWERED: (Question.created_at.desc(), Question.id.desc()),
}


def _like_pattern(term: str) -> str:
    escaped = (
        term.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def get_question(db: Session, question_id: int) -> Question:
    """Return a question by id or raise ``NotFoundError``."""
    question = db.get(Question, question_id)
    if question is None:
        raise NotFoundError("Question not found")
    return question


def list_questions(db: Session, criteria: QuestionFilter) -> list[Question]:
    """List questions matching ``criteria``.

    ``search`` is a case-insensitive substring match over title and
    description, ``tag`` must equal one of the question's tags, and
    ``sort_by`` picks the ordering. ``unanswered`` additionally restricts the
    result to questions without answers.
    """
    stmt = select(Question)

    if criteria.search:
        pattern = _like_pattern(criteria.search)
        stmt = stmt.where(
            or_(
                Question.title.ilike(pattern, escape=_LIKE_ESCAPE),
                Question.description.ilike(pattern, escape=_LIKE_ESCAPE),
            )
        )

    if criteria.tag:
        stmt = stmt.where(Question.tag_rows.any(QuestionTag.name == criteria.tag.lower()))

    if criteria.sort_by is QuestionSort.UNANSWERED:
        stmt = stmt.where(Question.answer_count == 0)

    stmt = stmt.order_by(*_ORDERINGS[criteria.sort_by])
    return list(db.scalars(stmt))


def related_questions(db: Session, question_id: int, limit: int = 5) -> list[Question]:
    """Return up to ``limit`` other questions sharing at least one tag.

    Results are ordered by views, most viewed first.
    """
    if limit < 1:
        raise ValidationError("limit must be at least 1")
    source = get_question(db, question_id)
    tags = source.tags
    if not tags:
        return []

    stmt = (
        select(Question)
        .where(
            Question.id != source.id,
            Question.tag_rows.any(QuestionTag.name.in_(tags)),
        )
        .order_by(Question.views.desc(), Question.created_at.desc(), Question.id.desc())
        .limit(limit)
    )
    return list(db.scalars(stmt))


def create_question(db: Session, author: User, data: QuestionCreate) -> Question:
    """Persist a new question with a snapshot of the author's username."""
    question = Question(
        title=data.title,
        description=data.description,
        author_id=author.id,
        author=author.username,
        tag_rows=[QuestionTag(name=name) for name in data.tags],
    )
    db.add(question)
    db.commit()
    db.refresh(question)
    return question


def increment_views(db: Session, question_id: int) -> None:
    """Bump a question's view counter by one."""
    result = db.execute(
        update(Question)
        .where(Question.id == question_id)
        .values(views=Question.views + 1)
    )
    if result.rowcount == 0:
        db.rollback()
        raise NotFoundError("Question not found")
    db.commit()
