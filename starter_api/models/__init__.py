"""SQLModel database models."""

from starter_api.models.user import User, UserRole
from starter_api.models.post import Post
from starter_api.models.comment import Comment

__all__ = [
    "User",
    "UserRole",
    "Post",
    "Comment",
]
