"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import exercise, notes, settings, sleep, users

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    users.router, prefix="/users", tags=["Users"]
)
api_router.include_router(
    sleep.router,
    prefix="/users/{user_id}/sleep",
    tags=["Sleep sessions"],
)
api_router.include_router(
    exercise.router,
    prefix="/users/{user_id}/exercise",
    tags=["Exercise"],
)
api_router.include_router(
    notes.router,
    prefix="/users/{user_id}/notes",
    tags=["Notes"],
)
api_router.include_router(
    settings.router, prefix="/settings", tags=["Settings"]
)
