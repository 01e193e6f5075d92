"""
Post database model.

Posts exist so that user relation counts have something to count.
"""

import uuid
from typing import TYPE_CHECKING, List, Optional

from pydantic import NaiveDatetime
from sqlalchemy import Column, DateTime
from sqlmodel import Field, Relationship, SQLModel

from starter_api.core.dates import utcnow

if TYPE_CHECKING:
    from starter_api.models.comment import Comment
    from starter_api.models.user import User


class Post(SQLModel, table=True):
    """A post authored by a user."""
    __tablename__ = "posts"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)
    title: str = Field(nullable=False, max_length=255)
    content: Optional[str] = Field(default=None)
    published: bool = Field(default=False, nullable=False)
    author_id: str = Field(foreign_key="users.id", nullable=False, index=True, ondelete="CASCADE")

    created_at: NaiveDatetime = Field(default_factory=utcnow,
                                      sa_column=Column(DateTime(timezone=False), nullable=False))
    updated_at: NaiveDatetime = Field(default_factory=utcnow,
                                      sa_column=Column(DateTime(timezone=False), nullable=False))

    author: Optional["User"] = Relationship(back_populates="posts")
    comments: List["Comment"] = Relationship(back_populates="post",
                                             sa_relationship_kwargs={"cascade": "all, delete-orphan"})
