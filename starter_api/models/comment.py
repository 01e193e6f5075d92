"""Comment database model."""

import uuid
from typing import TYPE_CHECKING, Optional

from pydantic import NaiveDatetime
from sqlalchemy import Column, DateTime
from sqlmodel import Field, Relationship, SQLModel

from starter_api.core.dates import utcnow

if TYPE_CHECKING:
    from starter_api.models.post import Post
    from starter_api.models.user import User


class Comment(SQLModel, table=True):
    """A comment left by a user on a post."""
    __tablename__ = "comments"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)
    content: str = Field(nullable=False)
    author_id: str = Field(foreign_key="users.id", nullable=False, index=True, ondelete="CASCADE")
    post_id: str = Field(foreign_key="posts.id", nullable=False, index=True, ondelete="CASCADE")

    created_at: NaiveDatetime = Field(default_factory=utcnow,
                                      sa_column=Column(DateTime(timezone=False), nullable=False))
    updated_at: NaiveDatetime = Field(default_factory=utcnow,
                                      sa_column=Column(DateTime(timezone=False), nullable=False))

    author: Optional["User"] = Relationship(back_populates="comments")
    post: Optional["Post"] = Relationship(back_populates="comments")
