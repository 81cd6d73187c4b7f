"""Signup, login and admin login, plus the bearer-token auth dependencies."""

from collections.abc import Callable
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from sunflix.core.config import Settings, get_settings
from sunflix.core.database import get_db
from sunflix.core.exceptions import NotFoundError
from sunflix.core.security import verify_token
from sunflix.models import User
from sunflix.models.user import ROLE_ADMIN
from sunflix.schemas.auth import AuthResponse, LoginRequest, SignupRequest, UserProfile
from sunflix.services import auth as auth_service

router = APIRouter()
security = HTTPBearer(auto_error=False)


def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> str:
    """Dependency: require a valid Bearer JWT and return the user id it carries. Raises 401."""
    token = credentials.credentials if credentials is not None else None
    return verify_token(token, settings)


def require_role(role: str) -> Callable[..., User]:
    """
    Build a dependency that admits only users whose stored role is `role`.

    The user record is re-read on every request, so role changes apply
    immediately. Raises 401 without a valid token and 403 otherwise.
    """

    def dependency(
        user_id: Annotated[str, Depends(get_current_user_id)],
        db: Annotated[Session, Depends(get_db)],
    ) -> User:
        return auth_service.require_role(db, user_id, role)

    return dependency


require_admin = require_role(ROLE_ADMIN)


@router.post("/signup", response_model=AuthResponse)
def signup(
    body: SignupRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthResponse:
    """Register a new user account and return a token for it."""
    return auth_service.register(db, settings, body.name, body.email, body.password)


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthResponse:
    """
    Authenticate with email and password; returns a JWT and the user.
    Include the token in the Authorization header as: Bearer <token>
    """
    return auth_service.login(db, settings, body.email, body.password)


@router.post("/admin-login", response_model=AuthResponse)
def admin_login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthResponse:
    return auth_service.admin_login(db, settings, body.email, body.password)


@router.get("/me", response_model=UserProfile)
def me(
    user_id: Annotated[str, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
) -> UserProfile:
    """Return the authenticated user's record without the password hash."""
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return UserProfile.model_validate(user)
