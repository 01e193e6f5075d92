"""
Shared API dependencies.

Reusable FastAPI dependencies for database access and services.
"""

from fastapi import Depends
from sqlmodel import Session

from starter_api.db.session import get_db
from starter_api.services.user_service import UserService


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """Build a UserService bound to the request's database session."""
    return UserService(db)
