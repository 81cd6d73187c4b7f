"""Core app configuration, database and security."""

from sunflix.core.config import Settings, get_settings
from sunflix.core.database import Database, get_db

__all__ = ["Settings", "get_settings", "Database", "get_db"]
