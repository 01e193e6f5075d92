"""
User database model.

Defines the User table, the only domain entity exposed over the API.
"""

import uuid
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from pydantic import NaiveDatetime
from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field, Relationship, SQLModel

from starter_api.core.dates import utcnow

if TYPE_CHECKING:
    from starter_api.models.comment import Comment
    from starter_api.models.post import Post


class UserRole(str, Enum):
    """Fixed set of user roles."""

    USER = "USER"
    MODERATOR = "MODERATOR"
    ADMIN = "ADMIN"


class User(SQLModel, table=True):
    """
    Application user.

    ``is_active`` is the only field touched by a soft delete. The JSON
    ``metadata`` column is exposed as ``user_metadata`` because SQLModel
    reserves ``metadata`` on the class.
    """
    __tablename__ = "users"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)

    # Profile
    name: Optional[str] = Field(default=None, max_length=255)
    avatar: Optional[str] = Field(default=None, max_length=2048)
    role: UserRole = Field(default=UserRole.USER, nullable=False)
    is_active: bool = Field(default=True, nullable=False)
    user_metadata: Optional[dict] = Field(default=None, sa_column=Column("metadata", JSON, nullable=True))

    # Timestamps
    created_at: NaiveDatetime = Field(default_factory=utcnow,
                                      sa_column=Column(DateTime(timezone=False), nullable=False, index=True))
    updated_at: NaiveDatetime = Field(default_factory=utcnow,
                                      sa_column=Column(DateTime(timezone=False), nullable=False))

    # Relations (counted, never serialized in full)
    posts: List["Post"] = Relationship(back_populates="author",
                                       sa_relationship_kwargs={"cascade": "all, delete-orphan"})
    comments: List["Comment"] = Relationship(back_populates="author",
                                             sa_relationship_kwargs={"cascade": "all, delete-orphan"})
