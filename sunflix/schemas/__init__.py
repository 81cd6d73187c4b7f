"""Pydantic request/response schemas."""

from sunflix.schemas.ad import AdCreate, AdOut, AdUpdate, DeleteResponse
from sunflix.schemas.auth import (
    AuthResponse,
    LoginRequest,
    PublicUser,
    SignupRequest,
    UserProfile,
)
from sunflix.schemas.health import HealthResponse
from sunflix.schemas.message import MessageCreate, MessageOut
from sunflix.schemas.video import VideoOut

__all__ = [
    "AdCreate",
    "AdOut",
    "AdUpdate",
    "AuthResponse",
    "DeleteResponse",
    "HealthResponse",
    "LoginRequest",
    "MessageCreate",
    "MessageOut",
    "PublicUser",
    "SignupRequest",
    "UserProfile",
    "VideoOut",
]
