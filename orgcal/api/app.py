"""FastAPI application configuration module."""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Internal imports
from ..config.environment import IS_PRODUCTION_ENVIRONMENT
from ..config.cors import CORS_CONFIG
from ..utils.logging_config import setup_logging
from ..db import DatabaseError
from .dependencies import get_database
from .routes import (
    calendar,
    events,
    health,
    houses
)

# Set up logging
setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup: honour an overridden database so tests never touch the default file
    database = app.dependency_overrides.get(get_database, get_database)()
    try:
        database.ensure_tables_exist()
        logger.info("Database initialized successfully")
    except DatabaseError as e:
        logger.error(f"Startup failed: {e}")
        raise
    yield
    # Shutdown
    database.dispose()

def create_application() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Organization Calendar API",
        description="API for scheduling house and community events",
        version="1.0.0",
        docs_url=None if IS_PRODUCTION_ENVIRONMENT else '/api/docs',
        redoc_url=None if IS_PRODUCTION_ENVIRONMENT else '/api/redoc',
        lifespan=lifespan
    )

    # Configure CORS
    app.add_middleware(CORSMiddleware, **CORS_CONFIG)

    # Include health check router without prefix
    app.include_router(health.router)

    # Include routers with prefix
    app.include_router(houses.router, prefix="/api")
    app.include_router(events.router, prefix="/api")
    app.include_router(calendar.router, prefix="/api")

    return app

# Create the application instance
app = create_application()
