# fastlonn/main.py
"""
Fastlønn web app.

Run locally with ``uvicorn fastlonn.main:app --reload``.
"""

import os
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fastlonn.core.config import APP_VERSION, DATABASE_URL, IS_PRODUCTION
from fastlonn.core.logging_config import get_logger, setup_logging
from fastlonn.core.request_logging import REQUEST_ID_HEADER, RequestLoggingMiddleware
from fastlonn.core.sentry_config import init_sentry
from fastlonn.core.session import CalculatorSession
from fastlonn.core.storage import DatabaseStorage
from fastlonn.database.database import create_tables, get_db
from fastlonn.routes.calendar_api import router as calendar_router
from fastlonn.routes.public import router as public_router
from fastlonn.routes.settings_api import router as settings_router

# Logging must be configured before anything below logs.
setup_logging()
logger = get_logger(__name__)

sentry_enabled = init_sentry()

STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the key-value table and load the saved calculator state."""
    logger.info(
        "Starting Fastlønn",
        extra={"extra_fields": {"version": APP_VERSION, "production": IS_PRODUCTION, "sentry": sentry_enabled}},
    )
    try:
        create_tables()
    except SQLAlchemyError:
        logger.exception(f"Could not create tables in {DATABASE_URL.split('://', 1)[0]} database")
        raise

    app.state.calculator = CalculatorSession(DatabaseStorage())
    logger.info(f"Loaded saved state, selected year {app.state.calculator.year}")

    yield

    logger.info("Shutting down")


def _cors_settings() -> dict:
    """Permissive in development; explicit CORS_ORIGINS in production."""
    if not IS_PRODUCTION:
        return {"allow_origins": ["*"], "allow_methods": ["*"]}

    origins = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "").split(",") if origin.strip()]
    if not origins:
        logger.warning("CORS_ORIGINS is empty; cross-origin requests will be rejected")
    return {"allow_origins": origins, "allow_methods": ["GET", "POST", "PUT"]}


app = FastAPI(
    title="Fastlønn",
    description="Lønns- og feriepengekalkulator for fastlønnede",
    version=APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_credentials=False,
    allow_headers=["*"],
    expose_headers=[REQUEST_ID_HEADER],
    **_cors_settings(),
)
app.add_middleware(RequestLoggingMiddleware)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

app.include_router(public_router)
app.include_router(calendar_router)
app.include_router(settings_router)


@app.get("/health", tags=["health"])
async def health_check(db: Session = Depends(get_db)):
    """200 when the database answers, 503 otherwise."""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Health check failed: {e}")
        raise HTTPException(
            status_code=503,
            detail={"status": "unhealthy", "database": "disconnected"},
        ) from e

    return {
        "status": "healthy",
        "service": "fastlonn",
        "version": APP_VERSION,
        "database": "connected",
    }
