"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from starter_api.models.user import User  # noqa: F401
from starter_api.models.post import Post  # noqa: F401
from starter_api.models.comment import Comment  # noqa: F401
