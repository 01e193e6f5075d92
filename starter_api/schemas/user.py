"""
User API schemas.

Pydantic models for user-related request/response validation. JSON field
names are camelCase (``isActive``, ``createdAt``); Python code uses the
snake_case attribute names.
"""

import datetime
from typing import Annotated, Any, List, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from starter_api.models.user import UserRole


def _check_email(value: str) -> str:
    """Validate an email address but keep it exactly as given."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(str(exc)) from exc
    return value


Email = Annotated[str, AfterValidator(_check_email)]


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Request schemas
class UserCreate(CamelModel):
    """Schema for creating a user."""
    email: Email
    name: Optional[str] = Field(None, max_length=255)
    avatar: Optional[str] = Field(None, max_length=2048)
    role: UserRole = UserRole.USER
    metadata: Optional[dict[str, Any]] = None


class UserUpdate(CamelModel):
    """Schema for a partial update. Only the fields sent are applied."""
    name: Optional[str] = Field(None, max_length=255)
    avatar: Optional[str] = Field(None, max_length=2048)
    role: Optional[UserRole] = None
    is_active: Optional[bool] = None
    metadata: Optional[dict[str, Any]] = None

    @field_validator("role", "is_active")
    @classmethod
    def not_null(cls, value):
        """``role`` and ``isActive`` may be omitted but not set to null."""
        if value is None:
            raise ValueError("may not be null")
        return value


# Response schemas
class UserCounts(CamelModel):
    """Number of related rows owned by a user."""
    posts: int = 0
    comments: int = 0


class UserResponse(CamelModel):
    """Schema for user data in API responses."""
    id: str
    email: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    role: UserRole
    is_active: bool
    metadata: Optional[dict[str, Any]] = None
    created_at: datetime.datetime
    updated_at: datetime.datetime


class UserWithCountsResponse(UserResponse):
    """User data plus relation counts, serialized under ``_count``."""
    counts: UserCounts = Field(default_factory=UserCounts, alias="_count")


class UserListResponse(CamelModel):
    """One page of users."""
    users: List[UserWithCountsResponse]
    total: int
    has_more: bool


class UserStatsResponse(CamelModel):
    """Aggregate user statistics."""
    total_users: int
    active_users: int
    new_users_this_month: int


class ErrorResponse(BaseModel):
    """Error envelope returned by every failing endpoint."""
    error: str
    message: str
