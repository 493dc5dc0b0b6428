"""
User Management - Main Application Entry Point

This module initializes and configures the FastAPI application including:
- Logging
- Database connection
- Server-rendered sign-up routes
- Health check endpoints
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse

from usermanagement.api import web_router
from usermanagement.core.config import settings
from usermanagement.core.database import close_db, init_db
from usermanagement.core.logging import configure_logging
from usermanagement.core.templates import INDEX_VIEW, render

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """
    Application lifespan manager.

    Handles startup and shutdown of the database connection.
    """
    # Startup
    configure_logging()
    logger.info(f"Starting User Management in {settings.python_env} mode...")

    try:
        await init_db()
        logger.info("[OK] Database connected")
    except Exception as e:
        logger.error(f"[FAIL] Database connection failed: {e}")
        if settings.is_production:
            raise

    yield  # Application runs here

    # Shutdown
    logger.info("Shutting down User Management...")
    await close_db()
    logger.info("[OK] Cleanup complete")


app = FastAPI(
    title="User Management",
    description="User sign-up with server-rendered forms",
    version="0.1.0",
    docs_url="/docs" if settings.is_development else None,
    redoc_url="/redoc" if settings.is_development else None,
    lifespan=lifespan,
)

app.include_router(web_router)


@app.get("/", response_class=HTMLResponse, tags=["Root"], include_in_schema=False)
async def index(request: Request) -> HTMLResponse:
    """Landing page."""
    return render(
        request,
        INDEX_VIEW,
        {
            "user_form": None,
            "errors": {},
            "signup_success": False,
            "form_error_message": None,
        },
    )


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Health check endpoint for container orchestration."""
    return {"status": "healthy"}


@app.get("/ready", tags=["Health"])
async def readiness_check() -> dict[str, str]:
    """Readiness check endpoint."""
    return {"status": "ready"}

