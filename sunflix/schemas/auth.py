"""Request/response schemas for auth endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SignupRequest(BaseModel):
    """Registration payload. Presence of every field is checked by the auth service."""

    name: str | None = Field(default=None, description="Display name")
    email: str | None = Field(default=None, description="Login email")
    password: str | None = Field(default=None, description="Password")


class LoginRequest(BaseModel):
    """Credentials for login and admin login."""

    email: str | None = Field(default=None, description="Login email")
    password: str | None = Field(default=None, description="Password")


class PublicUser(BaseModel):
    """User fields safe to return to clients (never the password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    role: str
    avatar: str | None = None
    approved: bool
    favorites: list[Any] = Field(default_factory=list)
    subscriptions: list[Any] = Field(default_factory=list)


class UserProfile(PublicUser):
    """Response for GET /auth/me: the stored record minus the password hash."""

    created_at: datetime | None = None
    updated_at: datetime | None = None


class AuthResponse(BaseModel):
    """JWT bearer token plus the public view of the authenticated user."""

    token: str = Field(..., description="JWT access token; send as 'Authorization: Bearer <token>'")
    user: PublicUser
