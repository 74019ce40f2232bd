"""
FastAPI application entry point.

This is the main entry point for the Prompt Gallery.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.middleware import setup_exception_handlers
from api.routers import (
    analyze_router,
    auth_router,
    health_router,
    images_router,
    pages_router,
    prompts_router,
    tags_router,
)
from core.config import Settings, get_settings
from database import close_database, init_database
from services.analyzer import close_prompt_analyzer

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format=settings.log_format,
)
logger = logging.getLogger(__name__)


def log_configuration_warnings(settings: Settings) -> None:
    """Warn about missing or unsafe settings at startup."""
    if not settings.is_gemini_configured:
        logger.warning("GEMINI_API_KEY not set, /api/analyze will report a configuration error")

    if not settings.is_auth_configured:
        logger.warning("ADMIN_EMAIL/ADMIN_PASSWORD not set, admin login is disabled")

    if settings.is_production and settings.uses_default_secret_key:
        logger.warning("SECRET_KEY is the built-in default, anyone can forge an admin session")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()

    # ============ Startup ============
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")

    log_configuration_warnings(settings)

    # Initialize PostgreSQL Database
    if settings.is_database_configured:
        try:
            await init_database()
            logger.info("PostgreSQL database initialized successfully")
        except Exception as e:
            logger.error(f"Failed to initialize database: {e}")
            # Don't raise - the gallery renders empty without a database
    else:
        logger.warning("Database not configured, the gallery will be empty and saving is disabled")

    logger.info("Application startup complete")

    yield

    # ============ Shutdown ============
    logger.info("Shutting down application...")

    await close_prompt_analyzer()

    # Close Database
    await close_database()

    logger.info("Application shutdown complete")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Curated gallery of bilingual image-generation prompts",
        version=settings.app_version,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        openapi_url="/openapi.json" if not settings.is_production else None,
        lifespan=lifespan,
    )

    # ============ Middleware ============

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # ============ Exception Handlers ============
    setup_exception_handlers(app)

    # ============ Routers ============

    # Health check
    app.include_router(health_router, prefix="/api")

    # Admin session
    app.include_router(auth_router, prefix="/api")

    # Gemini analysis proxy
    app.include_router(analyze_router, prefix="/api")

    # Gallery data
    app.include_router(prompts_router, prefix="/api")
    app.include_router(tags_router, prefix="/api")

    # Image serving (for local storage proxy)
    app.include_router(images_router, prefix="/api")

    # HTML pages
    app.include_router(pages_router)

    return app


# Create application instance
app = create_app()


def run():
    """Run the application with uvicorn (for development)."""
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
