"""Database handle and session management."""

import logging
import threading
from collections.abc import Generator

from fastapi import Request
from sqlalchemy import Engine, create_engine, text
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


class Database:
    """
    Owns the engine and session factory for one application instance.

    The engine is created on first use and reused afterwards. In-memory SQLite
    URLs share a single connection so every session sees the same data.
    """

    def __init__(self, url: str, echo: bool = False) -> None:
        self.url = url
        self.echo = echo
        self._engine: Engine | None = None
        self._sessionmaker: sessionmaker[Session] | None = None
        self._lock = threading.Lock()

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            with self._lock:
                if self._engine is None:
                    self._engine = self._create_engine()
        return self._engine

    def _create_engine(self) -> Engine:
        logger.info("Connecting to database", extra={"dialect": self.url.split(":", 1)[0]})
        if self.url.startswith("sqlite"):
            kwargs: dict = {"connect_args": {"check_same_thread": False}}
            if self.url in ("sqlite://", "sqlite:///:memory:"):
                kwargs["poolclass"] = StaticPool
            return create_engine(self.url, echo=self.echo, **kwargs)
        return create_engine(
            self.url,
            pool_pre_ping=True,
            pool_size=5,
            echo=self.echo,
        )

    def session(self) -> Session:
        if self._sessionmaker is None:
            self._sessionmaker = sessionmaker(
                autocommit=False, autoflush=False, bind=self.engine
            )
        return self._sessionmaker()

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None

    def create_all(self) -> None:
        """Create all tables (tests and local sqlite; production uses alembic)."""
        from sunflix.models import Base

        Base.metadata.create_all(self.engine)

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._sessionmaker = None


def get_database(request: Request) -> Database:
    """Dependency: the Database owned by the running application."""
    return request.app.state.database


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done."""
    db = get_database(request).session()
    try:
        yield db
    finally:
        db.close()


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception:
        logger.warning("Database connectivity check failed", exc_info=True)
        return False
