"""Database repositories."""

from starter_api.db.repositories.user import UserRepository

__all__ = [
    "UserRepository",
]
