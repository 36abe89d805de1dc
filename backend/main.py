"""
FastAPI application entry point.

Sets up the FastAPI application with logging, middleware and the task
routes.
"""

import logging
from pathlib import Path
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables first
load_dotenv()

# Import configuration
from .config import get_settings, configure_logging

# Import consolidated API router
from .routes import router as api_router, TASKS_TAG

# Get settings instance
settings = get_settings()
configure_logging(settings)

logger = logging.getLogger(__name__)

ALEMBIC_INI = Path(__file__).resolve().parent / "alembic.ini"

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Minimal CRUD API for tasks",
    version=settings.app_version,
    debug=settings.debug,
    openapi_tags=[{"name": TASKS_TAG, "description": "Tasks endpoints"}],
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Ensure database is initialized (run Alembic migrations) on startup
@app.on_event("startup")
def _ensure_database_initialized():
    try:
        # Inspect current database; if empty, apply migrations
        from sqlalchemy import inspect
        from .config.database import engine
        inspector = inspect(engine)
        tables = inspector.get_table_names()
        if not tables:
            logger.info("Database empty. Running Alembic upgrade head...")
            from alembic.config import Config
            from alembic import command
            cfg = Config(str(ALEMBIC_INI))
            command.upgrade(cfg, "head")
            logger.info("Alembic migration completed.")
    except Exception:
        # Don't crash the app on startup; just log the error.
        logger.exception("Database initialization failed")

# Include routers
app.include_router(api_router)

# Root endpoint
@app.get("/")
def read_root():
    """Health check endpoint."""
    return {
        "message": "Task Service is running!",
        "version": settings.app_version,
        "environment": settings.environment
    }
