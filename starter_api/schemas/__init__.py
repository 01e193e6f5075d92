"""Pydantic schemas for request/response validation."""

from starter_api.schemas.user import (
    ErrorResponse,
    UserCounts,
    UserCreate,
    UserListResponse,
    UserResponse,
    UserStatsResponse,
    UserUpdate,
    UserWithCountsResponse,
)

__all__ = [
    "ErrorResponse",
    "UserCounts",
    "UserCreate",
    "UserListResponse",
    "UserResponse",
    "UserStatsResponse",
    "UserUpdate",
    "UserWithCountsResponse",
]
