"""ORM model for contact messages sent through the site."""

from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, String, Text, func

from sunflix.models.base import Base, new_id


class Message(Base):
    __tablename__ = "messages"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False)
    email = Column(String(320), nullable=False)
    subject = Column(String(512), nullable=True)
    body = Column(Text, nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        server_default=func.now(),
        index=True,
    )
