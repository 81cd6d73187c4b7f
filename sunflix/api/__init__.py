"""HTTP routes."""

from fastapi import APIRouter

from sunflix.api.routes import ads, auth, health, messages, videos

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(videos.router, prefix="/videos", tags=["videos"])
router.include_router(ads.router, prefix="/ads", tags=["ads"])
router.include_router(messages.router, prefix="/messages", tags=["messages"])
