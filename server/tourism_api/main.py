"""FastAPI application initialization and configuration."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import SUPPORTED_LOCALES, settings
from .core.database import close_db, engine, init_db
from .core.exceptions import (
    ApiError,
    api_error_handler,
    generic_exception_handler,
    http_exception_handler,
    request_validation_handler,
)
from .core.i18n import translate
from .core.middleware import setup_middleware
from .core.observability import (
    instrument_fastapi,
    instrument_sqlalchemy,
    setup_metrics,
    setup_structured_logging,
    setup_tracing,
)
from .routers import API_PREFIX, api_router, health_router, metrics_router

# Configure structured logging
setup_structured_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Handles startup and shutdown events for the FastAPI application.
    """
    logger.info("Starting tourism API", extra={"environment": settings.environment, "debug": settings.debug})

    try:
        setup_tracing()
        setup_metrics()
        instrument_sqlalchemy(engine)
        logger.info("Observability setup completed")

        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error("Failed to initialize application", extra={"error": str(e)}, exc_info=True)
        raise

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down tourism API")
    await close_db()
    logger.info("Application shutdown complete")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title="Tourism API",
        description="Catalog of tours and rental cars with reviews, favorites and day-by-day tour programs",
        version="1.0.0",
        debug=settings.debug,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # Credentials cannot be combined with a wildcard origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=not settings.allow_any_origin,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    setup_middleware(app, enable_logging=True)

    instrument_fastapi(app)

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    @app.get(
        "/",
        status_code=status.HTTP_200_OK,
        tags=["Info"],
        summary="Welcome",
        response_model=dict,
    )
    async def root(request: Request):
        """
        Welcome message with example URLs for each supported language.

        Returns:
            dict: Service name, version and example endpoints
        """
        base = str(request.base_url).rstrip("/")
        return {
            "success": True,
            "message": translate("common.welcome"),
            "version": "1.0.0",
            "languages": list(SUPPORTED_LOCALES),
            "examples": {
                locale: {
                    "tours": f"{base}{API_PREFIX.format(lang=locale)}/tours",
                    "cars": f"{base}{API_PREFIX.format(lang=locale)}/cars",
                    "siteReviews": f"{base}{API_PREFIX.format(lang=locale)}/reviews/site",
                }
                for locale in SUPPORTED_LOCALES
            },
        }

    app.include_router(health_router)
    app.include_router(metrics_router)
    app.include_router(api_router)

    return app


# Create application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "tourism_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
        access_log=True,
    )
