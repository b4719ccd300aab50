"""User and authentication Pydantic schemas."""

from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from stackit.models.user import UserRole
from stackit.schemas.common import CamelModel


class RegisterRequest(CamelModel):
    """Schema for account registration."""

    username: str = Field(..., min_length=3, max_length=30, pattern=r"^[A-Za-z0-9_.-]+$")
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Store emails lowercase so uniqueness is case-insensitive."""
        return v.strip().lower()


class LoginRequest(CamelModel):
    """Schema for login submissions."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class UserResponse(CamelModel):
    """Public view of an account."""

    id: int
    username: str
    email: str
    role: UserRole
    avatar: str
    answer_count: int
    created_at: datetime


class AuthResponse(CamelModel):
    """Response returned after registration or login."""

    user: UserResponse
    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field("bearer", description="Token type (always 'bearer')")
