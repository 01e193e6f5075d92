"""
User service.

Business logic for user management: creation, lookups, paginated listing
with filters, partial updates, soft/hard deletion and statistics.
"""

import datetime
import logging
from typing import Optional, Union

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from starter_api.core.dates import local_to_storage, start_of_month, utcnow
from starter_api.core.exceptions import ConflictError, NotFoundError, ValidationError
from starter_api.db.repositories.user import UserRepository, build_filters
from starter_api.models.user import User, UserRole
from starter_api.schemas.user import (UserCounts, UserCreate, UserListResponse, UserResponse, UserStatsResponse,
                                      UserUpdate, UserWithCountsResponse, )

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


class UserService:
    """Service for user-related business logic."""

    def __init__(self, session: Session):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
        """
        self.repository = UserRepository(session)

    def create(self, data: UserCreate) -> UserResponse:
        """
        Create a new user.

        Args:
            data: Validated creation payload

        Returns:
            Created user with assigned id and timestamps

        Raises:
            ConflictError: If the email is already taken
        """
        user = User(email=data.email, name=data.name, avatar=data.avatar, role=data.role,
                    user_metadata=data.metadata, )
        try:
            user = self.repository.create(user)
        except IntegrityError as exc:
            self.repository.rollback()
            if self.repository.get_by_email(data.email) is None:
                raise
            logger.warning("Rejected duplicate user email %s", data.email)
            raise ConflictError("A user with this email already exists") from exc

        logger.info("Created user %s", user.id)
        return self._to_response(user)

    def get_by_id(self, user_id: str,
                  include_relations: bool = False) -> Optional[Union[UserResponse, UserWithCountsResponse]]:
        """
        Get user by ID.

        Args:
            user_id: User ID
            include_relations: Attach post and comment counts

        Returns:
            User if found, None otherwise
        """
        if include_relations:
            row = self.repository.get_by_id_with_counts(user_id)
            if row is None:
                return None
            user, posts, comments = row
            return self._to_counted_response(user, posts, comments)

        user = self.repository.get_by_id(user_id)
        return self._to_response(user) if user else None

    def get_by_email(self, email: str) -> Optional[UserResponse]:
        """Exact-match lookup by email. Returns None when absent."""
        user = self.repository.get_by_email(email)
        return self._to_response(user) if user else None

    def get_many(self, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT, search: Optional[str] = None,
                 role: Optional[UserRole] = None, is_active: Optional[bool] = None, ) -> UserListResponse:
        """
        List users, newest first.

        Args:
            page: 1-based page number
            limit: Page size
            search: Case-insensitive substring of name or email
            role: Role filter
            is_active: Active flag filter

        Returns:
            The page of users, the total matching count and whether more
            pages follow

        Raises:
            ValidationError: If page or limit is below 1
        """
        if page < 1:
            raise ValidationError("page must be greater than or equal to 1")
        if limit < 1:
            raise ValidationError("limit must be greater than or equal to 1")

        skip = (page - 1) * limit
        conditions = build_filters(search=search, role=role, is_active=is_active)

        rows = self.repository.find_many(conditions, skip=skip, limit=limit)
        total = self.repository.count(conditions)

        return UserListResponse(users=[self._to_counted_response(*row) for row in rows], total=total,
                                has_more=page * limit < total, )

    def update(self, user_id: str, data: UserUpdate) -> UserResponse:
        """
        Apply a partial update.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = self._get_or_raise(user_id)

        changes = data.model_dump(exclude_unset=True)
        if "metadata" in changes:
            changes["user_metadata"] = changes.pop("metadata")
        for field, value in changes.items():
            setattr(user, field, value)
        user.updated_at = utcnow()

        user = self.repository.update(user)
        return self._to_response(user)

    def delete(self, user_id: str, soft: bool = True) -> UserResponse:
        """
        Delete a user.

        Args:
            user_id: User ID
            soft: Only mark the user inactive when True, remove the row
                permanently otherwise

        Returns:
            The updated user (soft) or its last state before removal (hard)

        Raises:
            NotFoundError: If the user does not exist
        """
        if soft:
            return self.update(user_id, UserUpdate(is_active=False))

        user = self._get_or_raise(user_id)
        snapshot = self._to_response(user)
        self.repository.delete(user)
        logger.info("Permanently deleted user %s", user_id)
        return snapshot

    def get_stats(self, now: Optional[datetime.datetime] = None) -> UserStatsResponse:
        """
        Compute user statistics.

        Args:
            now: Server-local reference time (defaults to the current time)

        Returns:
            Total users, active users and users created since the first
            instant of the current calendar month
        """
        now = now or datetime.datetime.now()
        since = local_to_storage(start_of_month(now))

        return UserStatsResponse(total_users=self.repository.count(),
                                 active_users=self.repository.count(build_filters(is_active=True)),
                                 new_users_this_month=self.repository.count_created_since(since), )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_raise(self, user_id: str) -> User:
        user = self.repository.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    @staticmethod
    def _to_response(user: User) -> UserResponse:
        return UserResponse(id=user.id, email=user.email, name=user.name, avatar=user.avatar, role=user.role,
                            is_active=user.is_active, metadata=user.user_metadata, created_at=user.created_at,
                            updated_at=user.updated_at, )

    @classmethod
    def _to_counted_response(cls, user: User, posts: int, comments: int) -> UserWithCountsResponse:
        base = cls._to_response(user)
        return UserWithCountsResponse(**base.model_dump(), counts=UserCounts(posts=posts, comments=comments))
