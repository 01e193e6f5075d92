"""
Database initialization.

Creates all tables directly from the SQLModel metadata. Production
databases are migrated with Alembic instead.
"""

import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from starter_api.db import base  # noqa: F401  (registers all models)

logger = logging.getLogger(__name__)


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Initialize database schema.

    Args:
        bind: Engine to create the tables on (defaults to the app engine)
    """
    if bind is None:
        from starter_api.db.session import engine as bind

    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(bind)
    logger.info("Tables created: %s", ", ".join(sorted(SQLModel.metadata.tables)))
