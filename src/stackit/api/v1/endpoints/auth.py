"""Authentication endpoints for the StackIt API."""

from __future__ import annotations

from fastapi import APIRouter, status

from stackit.api.v1.dependencies import CurrentUserDep, SessionDep
from stackit.models import User
from stackit.schemas.user import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from stackit.services import accounts

router = APIRouter(prefix="/auth", tags=["authentication"])


def _auth_response(user: User) -> AuthResponse:
    return AuthResponse(
        user=UserResponse.model_validate(user),
        access_token=accounts.issue_token(user),
        token_type="bearer",
    )


@router.post(
    "/register",
    summary="Register a new account",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthResponse,
)
async def register_user(payload: RegisterRequest, db: SessionDep) -> AuthResponse:
    """Create an account and return it together with an access token."""
    user = accounts.register_user(db, payload)
    return _auth_response(user)


@router.post(
    "/login",
    summary="Authenticate with email and password",
    response_model=AuthResponse,
)
async def login_user(payload: LoginRequest, db: SessionDep) -> AuthResponse:
    """Exchange email and password for an access token."""
    user = accounts.authenticate(db, payload)
    return _auth_response(user)


@router.get("/me", response_model=UserResponse)
async def read_current_user(current_user: CurrentUserDep) -> User:
    """Return the authenticated user's account."""
    return current_user
