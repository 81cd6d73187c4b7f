"""Ad listing and admin-side ad management."""

import logging

from sqlalchemy.orm import Session

from sunflix.core.exceptions import NotFoundError, ValidationError
from sunflix.models import Ad
from sunflix.schemas.ad import AdCreate, AdUpdate

logger = logging.getLogger(__name__)


def list_active_ads(session: Session) -> list[Ad]:
    return session.query(Ad).filter(Ad.active.is_(True)).order_by(Ad.created_at).all()


def create_ad(session: Session, body: AdCreate) -> Ad:
    """Create an ad. position defaults to 'banner'; active unless explicitly false."""
    if not body.title or not body.image_url or not body.click_url:
        raise ValidationError("Missing required fields: title, imageUrl, clickUrl")
    ad = Ad(
        title=body.title,
        image_url=body.image_url,
        click_url=body.click_url,
        position=body.position or "banner",
        active=body.active is not False,
        impressions=0,
        clicks=0,
    )
    session.add(ad)
    session.commit()
    session.refresh(ad)
    logger.info("Ad created", extra={"ad_id": ad.id})
    return ad


def update_ad(session: Session, ad_id: str, body: AdUpdate) -> Ad:
    ad = session.get(Ad, ad_id)
    if ad is None:
        raise NotFoundError("Ad not found")
    changes = body.model_dump(exclude_unset=True)
    for field in ("title", "image_url", "click_url", "position"):
        # Required string columns cannot be cleared.
        if field in changes and not changes[field]:
            raise ValidationError(f"{field} must be non-empty")
    for field, value in changes.items():
        if value is None:
            continue
        setattr(ad, field, value)
    session.commit()
    session.refresh(ad)
    logger.info("Ad updated", extra={"ad_id": ad.id, "fields": sorted(changes)})
    return ad


def delete_ad(session: Session, ad_id: str) -> None:
    ad = session.get(Ad, ad_id)
    if ad is None:
        raise NotFoundError("Ad not found")
    session.delete(ad)
    session.commit()
    logger.info("Ad deleted", extra={"ad_id": ad_id})
