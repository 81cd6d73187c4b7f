"""Read-only queries over published videos."""

from sqlalchemy import or_
from sqlalchemy.orm import Session

from sunflix.core.exceptions import NotFoundError
from sunflix.models import Video

PUBLISHED = "published"

LIST_LIMIT = 50
HIGHLIGHT_LIMIT = 10
SEARCH_LIMIT = 20


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def list_videos(session: Session, category: str | None = None) -> list[Video]:
    query = session.query(Video).filter(Video.status == PUBLISHED)
    if category:
        query = query.filter(Video.category == category)
    return query.order_by(Video.created_at.desc()).limit(LIST_LIMIT).all()


def list_trending(session: Session) -> list[Video]:
    return (
        session.query(Video)
        .filter(Video.trending.is_(True), Video.status == PUBLISHED)
        .limit(HIGHLIGHT_LIMIT)
        .all()
    )


def list_featured(session: Session) -> list[Video]:
    return (
        session.query(Video)
        .filter(Video.featured.is_(True), Video.status == PUBLISHED)
        .limit(HIGHLIGHT_LIMIT)
        .all()
    )


def search_videos(session: Session, q: str | None) -> list[Video]:
    """Case-insensitive substring match on title or description. Empty query yields []."""
    if not q or not q.strip():
        return []
    pattern = f"%{_escape_like(q.strip())}%"
    return (
        session.query(Video)
        .filter(
            Video.status == PUBLISHED,
            or_(
                Video.title.ilike(pattern, escape="\\"),
                Video.description.ilike(pattern, escape="\\"),
            ),
        )
        .limit(SEARCH_LIMIT)
        .all()
    )


def get_video(session: Session, video_id: str) -> Video:
    video = session.get(Video, video_id)
    if video is None:
        raise NotFoundError("Video not found")
    return video
