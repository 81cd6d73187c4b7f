"""Pydantic schemas for catalog videos."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class VideoOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str
    category: str | None = None
    url: str
    thumbnail: str | None = None
    duration: int
    views: int
    status: str
    trending: bool
    featured: bool
    created_at: datetime | None = None
