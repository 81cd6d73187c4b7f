"""ORM model for advertisement banners."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, func

from sunflix.models.base import Base, new_id


class Ad(Base):
    __tablename__ = "ads"

    id = Column(String(32), primary_key=True, default=new_id)
    title = Column(String(255), nullable=False)
    image_url = Column(String(2048), nullable=False)
    click_url = Column(String(2048), nullable=False)
    position = Column(String(64), nullable=False, default="banner")
    active = Column(Boolean, nullable=False, default=True, index=True)
    impressions = Column(Integer, nullable=False, default=0)
    clicks = Column(Integer, nullable=False, default=0)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
