# src/stackit/services/__init__.py
"""Business logic services for the StackIt application."""

from . import accounts, acceptance, answers, contribution, notifications, questions, votes

__all__ = [
    "accounts",
    "acceptance",
    "answers",
    "contribution",
    "notifications",
    "questions",
    "votes",
]
