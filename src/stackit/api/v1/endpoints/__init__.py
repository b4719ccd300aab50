"""API endpoint modules for version 1."""

from .answers import router as answers_router
from .auth import router as auth_router
from .notifications import router as notifications_router
from .questions import router as questions_router
from .votes import router as votes_router

__all__ = [
    "answers_router",
    "auth_router",
    "notifications_router",
    "questions_router",
    "votes_router",
]
