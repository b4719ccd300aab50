"""Version 1 API endpoints."""

from .endpoints import (
    answers_router,
    auth_router,
    notifications_router,
    questions_router,
    votes_router,
)

__all__ = [
    "answers_router",
    "auth_router",
    "notifications_router",
    "questions_router",
    "votes_router",
]
