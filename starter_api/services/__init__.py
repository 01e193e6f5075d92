"""Business logic services."""

from starter_api.services.user_service import UserService

__all__ = [
    "UserService",
]
