"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .answer import AnswerCreate, AnswerResponse
from .common import MessageResponse
from .notification import MarkAllReadResponse, NotificationResponse, UnreadCountResponse
from .question import QuestionCreate, QuestionFilter, QuestionResponse, QuestionSort
from .user import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from .vote import UserVoteResponse, VoteCreate, VoteResponse

__all__ = [
    "AnswerCreate", "AnswerResponse",
    "MessageResponse",
    "MarkAllReadResponse", "NotificationResponse", "UnreadCountResponse",
    "QuestionCreate", "QuestionFilter", "QuestionResponse", "QuestionSort",
    "AuthResponse", "LoginRequest", "RegisterRequest", "UserResponse",
    "UserVoteResponse", "VoteCreate", "VoteResponse",
]
