"""
Credential and token authority: signup, login, admin login, role checks.

Failures raise the errors from sunflix.core.exceptions; routes let them
propagate to the exception handlers. Login failures use one generic message
per route so callers cannot tell a missing account from a wrong password or
a wrong role.
"""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from sunflix.core.exceptions import AuthError, AuthzError, ConflictError, ValidationError
from sunflix.core.security import (
    PASSWORD_MAX_BYTES,
    create_access_token,
    hash_password,
    verify_password,
)
from sunflix.models import User
from sunflix.models.user import ROLE_ADMIN, ROLE_USER
from sunflix.schemas.auth import AuthResponse, PublicUser

if TYPE_CHECKING:
    from sunflix.core.config import Settings

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"
INVALID_ADMIN_CREDENTIALS = "Invalid admin credentials"


def _issue(user: User, settings: "Settings") -> AuthResponse:
    token = create_access_token(sub=user.id, settings=settings)
    return AuthResponse(token=token, user=PublicUser.model_validate(user))


def register(
    session: Session,
    settings: "Settings",
    name: str | None,
    email: str | None,
    password: str | None,
) -> AuthResponse:
    """
    Create a user with role 'user' and approved=False, then issue a token.

    The existence check gives the common case a clean error; the unique index
    on users.email catches concurrent signups that both pass the check.
    """
    if not name or not email or not password:
        raise ValidationError("Missing required fields")
    if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValidationError("Password too long")

    if session.query(User).filter(User.email == email).first() is not None:
        raise ConflictError("User already exists")

    user = User(
        name=name,
        email=email,
        password_hash=hash_password(password, rounds=settings.BCRYPT_ROUNDS),
        role=ROLE_USER,
        approved=False,
        favorites=[],
        subscriptions=[],
    )
    session.add(user)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        logger.info("Signup lost a race on duplicate email")
        raise ConflictError("User already exists")
    session.refresh(user)

    logger.info("User registered", extra={"user_id": user.id})
    return _issue(user, settings)


def _authenticate(
    session: Session,
    email: str | None,
    password: str | None,
    role: str | None,
    failure_message: str,
) -> User:
    if not email or not password:
        raise ValidationError("Missing email or password")

    query = session.query(User).filter(User.email == email)
    if role is not None:
        query = query.filter(User.role == role)
    user = query.first()
    if user is None:
        raise AuthError(failure_message)
    if not verify_password(password, user.password_hash):
        raise AuthError(failure_message)
    return user


def login(
    session: Session,
    settings: "Settings",
    email: str | None,
    password: str | None,
) -> AuthResponse:
    """Authenticate any user by email and password and issue a token."""
    user = _authenticate(session, email, password, None, INVALID_CREDENTIALS)
    logger.info("User logged in", extra={"user_id": user.id})
    return _issue(user, settings)


def admin_login(
    session: Session,
    settings: "Settings",
    email: str | None,
    password: str | None,
) -> AuthResponse:
    """Like login, but only accounts with role 'admin' can authenticate."""
    user = _authenticate(session, email, password, ROLE_ADMIN, INVALID_ADMIN_CREDENTIALS)
    logger.info("Admin logged in", extra={"user_id": user.id})
    return _issue(user, settings)


def require_role(session: Session, user_id: str, role: str) -> User:
    """Re-read the user and raise AuthzError unless it exists and has `role`."""
    user = session.get(User, user_id)
    if user is None or user.role != role:
        logger.warning(
            "Role check failed", extra={"user_id": user_id, "required_role": role}
        )
        raise AuthzError("Unauthorized")
    return user
