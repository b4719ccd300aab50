# src/stackit/models/user.py
"""SQLAlchemy model for registered forum members."""

from __future__ import annotations

import enum

from sqlalchemy import Enum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from stackit.db.session import Base
from stackit.models.mixins import TimestampMixin


class UserRole(str, enum.Enum):
    """Coarse permission level attached to every account."""

    GUEST = "guest"
    USER = "user"
    ADMIN = "admin"


class User(TimestampMixin, Base):
    """A registered account.

    ``answer_count`` is a cached counter incremented only by answer creation;
    it drives the voting eligibility check.
    """

    __tablename__ = "user_account"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(30), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(254), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, name="user_role", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=UserRole.USER,
    )
    avatar: Mapped[str] = mapped_column(Text, nullable=False, default="")
    answer_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
