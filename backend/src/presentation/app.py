"""FastAPI application factory."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from domain.exceptions import (
    InvalidTransitionError,
    NotFoundError,
    UpstreamFailure,
    ValidationError,
)
from infrastructure.config import Settings, get_settings, get_logger, setup_logger
from presentation.api.v1.endpoints import admin, applications, health, uploads
from presentation.schemas import ErrorResponse

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Imported here so building the app never opens a connection
    from infrastructure.database import init_db, close_db

    # Startup
    await init_db()

    yield

    # Shutdown
    await close_db()


def _error(status_code: int, message: str, missing_fields: Optional[list[str]] = None) -> JSONResponse:
    body = ErrorResponse(error=message, missing_fields=missing_fields or [])
    return JSONResponse(status_code=status_code, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain exceptions to HTTP responses."""

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, exc.message)

    @app.exception_handler(InvalidTransitionError)
    async def invalid_transition_handler(request: Request, exc: InvalidTransitionError) -> JSONResponse:
        logger.warning(f"Refused transition on {request.url.path}: {exc.message}")
        return _error(status.HTTP_409_CONFLICT, exc.message)

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
        logger.warning(f"Validation failed on {request.url.path}: {exc.message}")
        return _error(status.HTTP_400_BAD_REQUEST, exc.message, exc.missing_fields)

    @app.exception_handler(UpstreamFailure)
    async def upstream_handler(request: Request, exc: UpstreamFailure) -> JSONResponse:
        logger.error(
            f"Upstream failure on {request.method} {request.url.path}: {exc.__cause__!r}",
            exc_info=exc.__cause__,
        )
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


def create_app(settings: Optional[Settings] = None, with_lifespan: bool = True) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use, defaults to the cached environment settings
        with_lifespan: Create tables on startup and dispose the engine on shutdown

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_settings()

    setup_logger(
        level=settings.log_level,
        log_format=settings.log_format,
    )

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan if with_lifespan else None,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(health.router, prefix=settings.api_v1_prefix)
    app.include_router(applications.router, prefix=settings.api_v1_prefix)
    app.include_router(admin.router, prefix=settings.api_v1_prefix)
    app.include_router(uploads.router, prefix=settings.api_v1_prefix)

    # Stored documents are served from the URLs the storage hands out
    settings.upload_path.mkdir(parents=True, exist_ok=True)
    app.mount(
        settings.upload_url_prefix,
        StaticFiles(directory=settings.upload_path),
        name="uploads",
    )

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "running"
        }

    return app
