"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.api.v1.router import api_router
from app.core.config import settings
from app.core.logging import configure_logging
from app.sleeptime.errors import InvalidTimeZone, OverlapConflict, SleepValidationError

configure_logging(settings.LOG_LEVEL, settings.LOG_JSON)
logger = structlog.get_logger()

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Sleep sessions with DST-aware durations and a strict no-overlap rule.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json")

# Include API router
app.include_router(api_router, prefix="/api/v1")


@app.exception_handler(InvalidTimeZone)
async def invalid_timezone_handler(request: Request, exc: InvalidTimeZone):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST,
                        content={ "detail": "invalid timezone", "timezone": exc.identifier })


@app.exception_handler(SleepValidationError)
async def validation_error_handler(request: Request, exc: SleepValidationError):
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content={ "detail": str(exc) })


@app.exception_handler(OverlapConflict)
async def overlap_conflict_handler(request: Request, exc: OverlapConflict):
    return JSONResponse(status_code=status.HTTP_409_CONFLICT,
                        content={ "detail": str(exc), "conflicting_id": exc.conflicting_id })


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "sleep-log-api",
        "version": settings.VERSION
    }
