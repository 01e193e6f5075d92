"""
User repository.

Handles database operations for User model, including the relation
counts and aggregates used by listing and statistics.
"""

import datetime
from typing import Any, Optional

from sqlalchemy import func
from sqlmodel import Session, col, select

from starter_api.models.comment import Comment
from starter_api.models.post import Post
from starter_api.models.user import User, UserRole

# (user, post count, comment count)
UserWithCounts = tuple[User, int, int]


def _post_count():
    return (select(func.count(col(Post.id))).where(Post.author_id == User.id).correlate(User)
            .scalar_subquery().label("post_count"))


def _comment_count():
    return (select(func.count(col(Comment.id))).where(Comment.author_id == User.id).correlate(User)
            .scalar_subquery().label("comment_count"))


def build_filters(search: Optional[str] = None, role: Optional[UserRole] = None,
                  is_active: Optional[bool] = None) -> list[Any]:
    """
    Build WHERE conditions for user listing.

    Args:
        search: Case-insensitive substring matched against name OR email
        role: Exact role
        is_active: Exact active flag

    Returns:
        List of SQL conditions (empty when nothing filters)
    """
    conditions: list[Any] = []
    if search:
        conditions.append(col(User.name).icontains(search, autoescape=True)
                          | col(User.email).icontains(search, autoescape=True))
    if role is not None:
        conditions.append(col(User.role) == role)
    if is_active is not None:
        conditions.append(col(User.is_active) == is_active)
    return conditions


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def create(self, user: User) -> User:
        """
        Insert a new user.

        Raises:
            sqlalchemy.exc.IntegrityError: On a unique email violation. The
                session is left for the caller to roll back.
        """
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self.session.get(User, user_id)

    def get_by_id_with_counts(self, user_id: str) -> Optional[UserWithCounts]:
        """Get a user together with its post and comment counts."""
        statement = select(User, _post_count(), _comment_count()).where(User.id == user_id)
        row = self.session.exec(statement).first()
        if row is None:
            return None
        user, posts, comments = row
        return user, int(posts or 0), int(comments or 0)

    def get_by_email(self, email: str) -> Optional[User]:
        statement = select(User).where(User.email == email)
        return self.session.exec(statement).first()

    def find_many(self, conditions: list[Any], skip: int = 0, limit: int = 10) -> list[UserWithCounts]:
        """
        Get one page of users, newest first, with relation counts.

        Args:
            conditions: WHERE conditions from :func:`build_filters`
            skip: Number of records to skip
            limit: Maximum number of records to return
        """
        statement = (select(User, _post_count(), _comment_count()).where(*conditions)
                     .order_by(col(User.created_at).desc(), col(User.id)).offset(skip).limit(limit))
        rows = self.session.exec(statement).all()
        return [(user, int(posts or 0), int(comments or 0)) for user, posts, comments in rows]

    def count(self, conditions: Optional[list[Any]] = None) -> int:
        """Count users matching ``conditions`` (all users when omitted)."""
        statement = select(func.count()).select_from(User).where(*(conditions or []))
        return self.session.exec(statement).one() or 0

    def count_created_since(self, since: datetime.datetime) -> int:
        return self.count([col(User.created_at) >= since])

    def update(self, user: User) -> User:
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def delete(self, user: User) -> None:
        """Permanently remove a user and its posts and comments."""
        self.session.delete(user)
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()
