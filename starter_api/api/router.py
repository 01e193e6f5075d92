"""
API router.

Aggregates all endpoints.
"""

from fastapi import APIRouter

from starter_api.api.endpoints import health, users

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    users.router, prefix="/users", tags=["Users"]
)
api_router.include_router(
    health.router, tags=["Health"]
)
