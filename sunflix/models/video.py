"""ORM model for catalog videos."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, func

from sunflix.models.base import Base, new_id


class Video(Base):
    """A catalog entry. Only status='published' videos are listed publicly."""

    __tablename__ = "videos"

    id = Column(String(32), primary_key=True, default=new_id)
    title = Column(String(512), nullable=False)
    description = Column(Text, nullable=False, default="")
    category = Column(String(128), nullable=True, index=True)
    url = Column(String(2048), nullable=False, default="")
    thumbnail = Column(String(2048), nullable=True)
    duration = Column(Integer, nullable=False, default=0)
    views = Column(Integer, nullable=False, default=0)
    status = Column(String(32), nullable=False, default="draft", index=True)
    trending = Column(Boolean, nullable=False, default=False)
    featured = Column(Boolean, nullable=False, default=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
