"""Account registration, login and token issuance."""
from __future__ import annotations

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from stackit.core import security
from stackit.core.errors import ConflictError, UnauthorizedError
from stackit.models import User
from stackit.schemas.user import LoginRequest, RegisterRequest

__all__ = [
    "authenticate",
    "get_user",
    "issue_token",
    "register_user",
]


def get_user(db: Session, user_id: int) -> User | None:
    """Return a single user by primary key."""
    return db.get(User, user_id)


def register_user(db: Session, data: RegisterRequest) -> User:
    """Create an account with an argon2id password hash.

    Raises:
        ConflictError: If the email or username is already in use
    """
    existing = db.scalars(
        select(User).where(or_(User.email == data.email, User.username == data.username))
    ).first()
    if existing is not None:
        if existing.email == data.email:
            raise ConflictError("Email is already registered", code="email_taken")
        raise ConflictError("Username is already taken", code="username_taken")

    user = User(
        username=data.username,
        email=data.email,
        password_hash=security.hash_password(data.password),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as err:
        db.rollback()
        raise ConflictError("Username or email is already registered") from err
    db.refresh(user)
    return user


def authenticate(db: Session, data: LoginRequest) -> User:
    """Return the user owning ``data.email`` if the password matches.

    Raises:
        UnauthorizedError: If the email is unknown or the password is wrong
    """
    user = db.scalars(select(User).where(User.email == data.email)).first()
    if user is None or not security.verify_password(data.password, user.password_hash):
        raise UnauthorizedError("Invalid email or password", code="invalid_credentials")
    return user


def issue_token(user: User) -> str:
    """Create an access token carrying the principal's id, username and role."""
    return security.create_access_token(
        user.id,
        {"username": user.username, "role": user.role.value},
    )
