"""Pydantic schemas for ads. Inputs accept both snake_case and the frontend's camelCase."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class AdCreate(BaseModel):
    """Body for POST /ads. Required fields are checked by the ads service for a 400 response."""

    title: str | None = None
    image_url: str | None = Field(
        default=None, validation_alias=AliasChoices("image_url", "imageUrl")
    )
    click_url: str | None = Field(
        default=None, validation_alias=AliasChoices("click_url", "clickUrl")
    )
    position: str | None = None
    active: bool | None = None


class AdUpdate(BaseModel):
    """Partial update for PUT /ads/{id}; only fields that were sent are applied."""

    title: str | None = None
    image_url: str | None = Field(
        default=None, validation_alias=AliasChoices("image_url", "imageUrl")
    )
    click_url: str | None = Field(
        default=None, validation_alias=AliasChoices("click_url", "clickUrl")
    )
    position: str | None = None
    active: bool | None = None
    impressions: int | None = Field(default=None, ge=0)
    clicks: int | None = Field(default=None, ge=0)


class AdOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    image_url: str
    click_url: str
    position: str
    active: bool
    impressions: int
    clicks: int
    created_at: datetime | None = None


class DeleteResponse(BaseModel):
    success: bool = True
