# src/stackit/models/__init__.py
"""SQLAlchemy models for the StackIt application."""

from .answer import Answer
from .notification import Notification, NotificationType
from .question import Question, QuestionTag
from .user import User, UserRole
from .vote import Vote, VoteType

__all__ = [
    "Answer",
    "Notification", "NotificationType",
    "Question", "QuestionTag",
    "User", "UserRole",
    "Vote", "VoteType",
]
