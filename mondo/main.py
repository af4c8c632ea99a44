import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mondo.config import settings
from mondo.exception_handlers import register_exception_handlers
from mondo.middleware.language import LanguageMiddleware
from mondo.middleware.logging import StructuredLoggingMiddleware, setup_structured_logging
from mondo.routes import contact, health, i18n, portfolio, posts

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


def create_app() -> FastAPI:
    """Create the FastAPI application."""
    setup_structured_logging(settings.log_level, json_format=settings.log_json)

    app = FastAPI(
        title=settings.app_name,
        description="Content API for the Mondo site: localized posts and portfolio items",
        debug=settings.debug,
        version=settings.app_version,
    )

    # Starlette runs middleware LIFO: logging wraps language detection
    app.add_middleware(LanguageMiddleware)
    app.add_middleware(StructuredLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(posts.router, prefix=f"{API_PREFIX}/posts")
    app.include_router(portfolio.router, prefix=f"{API_PREFIX}/portfolio")
    app.include_router(contact.router, prefix=API_PREFIX)
    app.include_router(i18n.router, prefix=f"{API_PREFIX}/i18n")

    @app.get("/", tags=["Root"])
    async def root():
        return {
            "message": settings.app_name,
            "version": settings.app_version,
            "endpoints": {
                "health": "/health",
                "posts": f"{API_PREFIX}/posts/",
                "postById": f"{API_PREFIX}/posts/{{id}}",
                "postBySlug": f"{API_PREFIX}/posts/slug/{{slug}}",
                "portfolio": f"{API_PREFIX}/portfolio/",
                "contact": f"{API_PREFIX}/contact",
                "languages": f"{API_PREFIX}/i18n/languages",
            },
        }

    if settings.debug:
        logger.info(f"Running in {settings.environment} mode")
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
        logging.getLogger("sqlalchemy.pool").setLevel(logging.INFO)

    return app


app = create_app()
