"""
FastAPI application setup for the travel coordination backend.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from datetime import datetime
from contextlib import asynccontextmanager

from sqlalchemy import text

from travel_hub.config import get_settings
from travel_hub.core.db import create_all_tables, get_engine
from travel_hub.core.error_handlers import error_handler, setup_error_handlers
from travel_hub.core.logging import configure_logging
from travel_hub.middleware import RequestContextMiddleware

# Get application settings
settings = get_settings()

configure_logging(settings.log_level.value, settings.log_format, settings.log_file)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan: optional table creation on startup, engine disposal
    on shutdown.
    """
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    try:
        if settings.database.create_tables:
            await create_all_tables()
            logger.info("Database tables ensured")

        logger.info("Application startup complete")

        yield

    except Exception as e:
        logger.error(f"Application startup failed: {e}", exc_info=True)
        raise

    finally:
        logger.info("Shutting down application")
        await get_engine().dispose()
        logger.info("Application shutdown complete")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        **settings.get_cors_config()
    )
    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)

    from travel_hub.api import analytics_router, bookings_router, groups_router, members_router
    app.include_router(groups_router)
    app.include_router(members_router)
    app.include_router(bookings_router)
    app.include_router(analytics_router)

    @app.get("/")
    async def root():
        """Root endpoint for basic health check."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.app_version,
            "status": "running"
        }

    @app.get("/health")
    async def health_check():
        """Health check with database connectivity and error statistics."""
        try:
            async with get_engine().connect() as conn:
                await conn.execute(text("SELECT 1"))
            database = {"status": "healthy", "connection": "ok"}
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            database = {"status": "unhealthy", "error": str(e)}

        return {
            "status": "healthy" if database["status"] == "healthy" else "unhealthy",
            "version": settings.app_version,
            "timestamp": datetime.utcnow().isoformat(),
            "details": {"database": database},
            "error_statistics": error_handler.get_error_statistics(),
        }

    return app


# Create application instance
app = create_app()
