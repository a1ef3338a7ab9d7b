import logging

from fastapi import FastAPI

from fastapi_lang.config import settings
from fastapi_lang.exception_handlers import register_exception_handlers
from fastapi_lang.middleware.language import LanguageMiddleware
from fastapi_lang.middleware.logging import StructuredLoggingMiddleware
from fastapi_lang.negotiation import LanguageConfig
from fastapi_lang.routes.i18n import i18n_router

logger = logging.getLogger(__name__)


def create_app(config: LanguageConfig | None = None) -> FastAPI:
    """Create the FastAPI application.

    ``config`` defaults to the one described by the ``LANGUAGE_*`` settings.
    """
    if config is None:
        config = LanguageConfig.from_settings(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Per-request language negotiation",
        debug=settings.debug,
        version=settings.app_version,
    )

    # Starlette middleware is LIFO: logging wraps language negotiation
    app.add_middleware(LanguageMiddleware, config=config, set_content_language=settings.set_content_language)
    app.add_middleware(StructuredLoggingMiddleware)

    register_exception_handlers(app)

    app.include_router(i18n_router, prefix="/api/v1/i18n")

    @app.get("/health", tags=["Root"])
    async def health():
        return {"status": "ok"}

    logger.info("Language negotiation configured: %r", config)
    return app
