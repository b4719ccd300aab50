# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from datetime import UTC, datetime, timedelta
from itertools import count
from types import SimpleNamespace

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from stackit.core.security import hash_password
from stackit.db.session import Base
from stackit.db.session import get_db as app_get_session
from stackit.main import app as fastapi_app
from stackit.models import Answer, Question, QuestionTag, User
from stackit.services.accounts import issue_token

TEST_DB_URL = "sqlite://"
TEST_PASSWORD = "correct-horse"

_USER_COUNTER = count(1)
_PASSWORD_HASH = hash_password(TEST_PASSWORD)
_BASE_TIME = datetime(2026, 1, 1, tzinfo=UTC)


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()

        # Ensure each test sees a clean database.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture()
def file_sessions(tmp_path) -> Iterator[sessionmaker]:
    """Session factory over an on-disk database, for tests that need real
    concurrent connections instead of the shared in-memory one."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'stackit.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield sessionmaker(bind=engine, autocommit=False, autoflush=False)
    finally:
        engine.dispose()


@pytest.fixture()
def seed_forum(file_sessions: sessionmaker) -> Callable[..., SimpleNamespace]:
    """Return a factory that seeds one question with answers and eligible voters
    into the on-disk database, returning their ids."""

    def _seed_forum(*, answers: int = 1, voters: int = 0) -> SimpleNamespace:
        with file_sessions() as db:
            asker = User(username="asker", email="asker@example.com", password_hash=_PASSWORD_HASH)
            answerer = User(
                username="answerer",
                email="answerer@example.com",
                password_hash=_PASSWORD_HASH,
                answer_count=answers,
            )
            crowd = [
                User(
                    username=f"crowd{n}",
                    email=f"crowd{n}@example.com",
                    password_hash=_PASSWORD_HASH,
                    answer_count=2,
                )
                for n in range(voters)
            ]
            db.add_all([asker, answerer, *crowd])
            db.flush()

            question = Question(
                title="Which isolation level do I need?",
                description="Counters drift under load.",
                author_id=asker.id,
                author=asker.username,
                answer_count=answers,
            )
            db.add(question)
            db.flush()

            rows = [
                Answer(
                    question_id=question.id,
                    content=f"answer {n}",
                    author_id=answerer.id,
                    author=answerer.username,
                )
                for n in range(answers)
            ]
            db.add_all(rows)
            db.flush()

            forum = SimpleNamespace(
                asker_id=asker.id,
                question_id=question.id,
                answer_ids=[row.id for row in rows],
                voter_ids=[user.id for user in crowd],
            )
            db.commit()
            return forum

    return _seed_forum


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., User]:
    """Return a factory that persists users with a known password."""

    def _make_user(username: str | None = None, *, answer_count: int = 0) -> User:
        n = next(_USER_COUNTER)
        username = username or f"user{n}"
        user = User(
            username=username,
            email=f"{username}@example.com",
            password_hash=_PASSWORD_HASH,
            answer_count=answer_count,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture()
def make_question(db_session: Session) -> Callable[..., Question]:
    """Return a factory that persists questions with controllable counters."""

    offsets = count(0)

    def _make_question(
        author: User,
        title: str = "How do I use SQLAlchemy sessions?",
        *,
        description: str = "Looking for the idiomatic pattern.",
        tags: tuple[str, ...] = (),
        views: int = 0,
        answer_count: int = 0,
        created_at: datetime | None = None,
    ) -> Question:
        question = Question(
            title=title,
            description=description,
            author_id=author.id,
            author=author.username,
            views=views,
            answer_count=answer_count,
            created_at=created_at or _BASE_TIME + timedelta(minutes=next(offsets)),
            tag_rows=[QuestionTag(name=tag) for tag in tags],
        )
        db_session.add(question)
        db_session.commit()
        db_session.refresh(question)
        return question

    return _make_question


@pytest.fixture()
def make_answer(db_session: Session) -> Callable[..., Answer]:
    """Return a factory that persists answers without touching counters."""

    def _make_answer(question: Question, author: User, content: str = "Use a context manager.") -> Answer:
        answer = Answer(
            question_id=question.id,
            content=content,
            author_id=author.id,
            author=author.username,
        )
        db_session.add(answer)
        db_session.commit()
        db_session.refresh(answer)
        return answer

    return _make_answer


@pytest.fixture()
def asker(make_user: Callable[..., User]) -> User:
    """A user who asks questions and has not answered any."""
    return make_user("asker")


@pytest.fixture()
def voter(make_user: Callable[..., User]) -> User:
    """A user exactly at the contribution threshold."""
    return make_user("voter", answer_count=2)


@pytest.fixture()
def newcomer(make_user: Callable[..., User]) -> User:
    """A user below the contribution threshold."""
    return make_user("newcomer", answer_count=1)


@pytest.fixture()
def question(make_question: Callable[..., Question], asker: User) -> Question:
    return make_question(asker, tags=("python", "sqlalchemy"))


@pytest.fixture()
def answer(make_answer: Callable[..., Answer], question: Question, newcomer: User) -> Answer:
    return make_answer(question, newcomer)


def auth_headers(user: User) -> dict[str, str]:
    """Return authorization headers for ``user``."""
    return {"Authorization": f"Bearer {issue_token(user)}"}


@pytest.fixture()
def asker_headers(asker: User) -> dict[str, str]:
    return auth_headers(asker)


@pytest.fixture()
def voter_headers(voter: User) -> dict[str, str]:
    return auth_headers(voter)


@pytest.fixture()
def newcomer_headers(newcomer: User) -> dict[str, str]:
    return auth_headers(newcomer)


@pytest.fixture()
def auth_headers_for() -> Callable[[User], dict[str, str]]:
    return auth_headers
