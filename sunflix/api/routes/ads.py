"""Ads: public listing, admin-only create/update/delete."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from sunflix.api.routes.auth import require_admin
from sunflix.core.database import get_db
from sunflix.models import User
from sunflix.schemas.ad import AdCreate, AdOut, AdUpdate, DeleteResponse
from sunflix.services import ads as ads_service

router = APIRouter()


@router.get("", response_model=list[AdOut])
def list_ads(db: Annotated[Session, Depends(get_db)]) -> list[AdOut]:
    """Active ads only."""
    return [AdOut.model_validate(ad) for ad in ads_service.list_active_ads(db)]


@router.post("", response_model=AdOut)
def create_ad(
    body: AdCreate,
    _admin: Annotated[User, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> AdOut:
    return AdOut.model_validate(ads_service.create_ad(db, body))


@router.put("/{ad_id}", response_model=AdOut)
def update_ad(
    ad_id: str,
    body: AdUpdate,
    _admin: Annotated[User, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> AdOut:
    return AdOut.model_validate(ads_service.update_ad(db, ad_id, body))


@router.delete("/{ad_id}", response_model=DeleteResponse)
def delete_ad(
    ad_id: str,
    _admin: Annotated[User, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> DeleteResponse:
    ads_service.delete_ad(db, ad_id)
    return DeleteResponse(success=True)
