"""
FastAPI application factory. No business logic; only wiring, middleware and
error handlers. Run with:

  uvicorn --factory sunflix.main:create_app
"""

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sunflix.api import router as api_router
from sunflix.core.config import Settings, get_settings
from sunflix.core.database import Database
from sunflix.core.exceptions import SunflixError

logger = logging.getLogger(__name__)


async def sunflix_error_handler(request: Request, exc: SunflixError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.info(
        "Rejected request body", extra={"path": request.url.path, "errors": exc.errors()}
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body"},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """
    Build the application.

    Settings come from the environment (and .env) unless passed in; a missing
    JWT_SECRET fails here, before the app serves anything. The database handle
    belongs to the app and connects lazily on the first request that needs it.
    """
    if settings is None:
        load_dotenv()
        settings = get_settings()
    if database is None:
        database = Database(settings.DATABASE_URL, echo=settings.DEBUG)

    app = FastAPI(
        title="Sunflix API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    app.state.database = database
    app.dependency_overrides[get_settings] = lambda: settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(SunflixError, sunflix_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/")
    def root() -> dict[str, str]:
        """Root route; minimal payload for discovery."""
        return {"message": "Sunflix API"}

    logger.info("Sunflix API initialized", extra={"app_env": settings.APP_ENV})
    return app
