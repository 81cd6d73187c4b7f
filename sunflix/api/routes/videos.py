"""Public video catalog."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from sunflix.core.database import get_db
from sunflix.schemas.video import VideoOut
from sunflix.services import catalog

router = APIRouter()


@router.get("", response_model=list[VideoOut])
def list_videos(
    db: Annotated[Session, Depends(get_db)],
    category: Annotated[str | None, Query()] = None,
) -> list[VideoOut]:
    return [VideoOut.model_validate(v) for v in catalog.list_videos(db, category)]


@router.get("/trending/list", response_model=list[VideoOut])
def trending(db: Annotated[Session, Depends(get_db)]) -> list[VideoOut]:
    return [VideoOut.model_validate(v) for v in catalog.list_trending(db)]


@router.get("/featured/list", response_model=list[VideoOut])
def featured(db: Annotated[Session, Depends(get_db)]) -> list[VideoOut]:
    return [VideoOut.model_validate(v) for v in catalog.list_featured(db)]


@router.get("/search", response_model=list[VideoOut])
def search(
    db: Annotated[Session, Depends(get_db)],
    q: Annotated[str | None, Query()] = None,
) -> list[VideoOut]:
    return [VideoOut.model_validate(v) for v in catalog.search_videos(db, q)]


# Declared last so the fixed paths above are matched first.
@router.get("/{video_id}", response_model=VideoOut)
def get_video(video_id: str, db: Annotated[Session, Depends(get_db)]) -> VideoOut:
    return VideoOut.model_validate(catalog.get_video(db, video_id))
