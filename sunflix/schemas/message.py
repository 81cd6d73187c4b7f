"""Pydantic schemas for contact messages."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class MessageCreate(BaseModel):
    name: str | None = None
    email: str | None = None
    subject: str | None = None
    body: str | None = None


class MessageOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    subject: str | None = None
    body: str
    created_at: datetime | None = None
