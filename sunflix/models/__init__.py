"""SQLAlchemy ORM models."""

from sunflix.models.ad import Ad
from sunflix.models.base import Base
from sunflix.models.message import Message
from sunflix.models.user import User
from sunflix.models.video import Video

__all__ = ["Ad", "Base", "Message", "User", "Video"]
