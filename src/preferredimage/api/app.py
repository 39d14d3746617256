"""FastAPI application for the preferredimage daemon."""

import time

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from preferredimage import __version__
from preferredimage.api import routes
from preferredimage.api.middleware import RequestLoggingMiddleware
from preferredimage.config import Config
from preferredimage.core.orchestrator import SelectionOrchestrator
from preferredimage.utils.logger import get_logger

logger = get_logger(__name__)


class AppState:
    """Application state container."""

    def __init__(self, config: Config):
        self.config = config
        self.start_time = time.time()
        self.orchestrator = SelectionOrchestrator(
            supported_types=config.image_types,
            default_metadata_language=config.metadata_language,
        )


def create_app(config: Config) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        config: Application configuration

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="preferredimage",
        description="Language-aware artwork selection for media libraries",
        version=__version__,
    )

    app.add_middleware(RequestLoggingMiddleware)

    app.state.preferredimage = AppState(config)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle Pydantic validation errors with detailed logging."""
        logger.error(
            "Request payload validation failed",
            path=request.url.path,
            method=request.method,
            errors=exc.errors(),
        )

        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "status": "error",
                "message": "Invalid request payload",
                "errors": jsonable_errors(exc),
            },
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Catch all unhandled exceptions."""
        logger.error(
            "Unhandled exception in request handler",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            error_type=type(exc).__name__,
            exc_info=True,
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": "error",
                "message": "Internal server error",
            },
        )

    app.include_router(routes.router)

    logger.info(
        "FastAPI application created",
        version=__version__,
        api_port=config.api.port,
        image_types=[t.value for t in config.image_types],
        metadata_language=config.metadata_language,
    )

    return app


def jsonable_errors(exc: RequestValidationError) -> list:
    """Validation errors reduced to JSON-safe fields."""
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
