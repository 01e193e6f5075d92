"""
User endpoints.

List/create users, per-user read/update/delete, and statistics.
"""

import json
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError as PydanticValidationError

from starter_api.api.dependencies import get_user_service
from starter_api.api.responses import error_response, format_validation_errors, model_response, unexpected_error
from starter_api.core.exceptions import NotFoundError, ServiceError
from starter_api.models.user import UserRole
from starter_api.schemas.user import (ErrorResponse, UserCreate, UserListResponse, UserResponse, UserStatsResponse,
                                      UserUpdate, UserWithCountsResponse, )
from starter_api.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def _parse_flag(value: Optional[str]) -> Optional[bool]:
    """``"true"`` is True, any other non-empty value False, absent None."""
    if not value:
        return None
    return value == "true"


@router.get("", summary="List users with pagination and filters.", response_model=UserListResponse,
            responses=ERROR_RESPONSES, )
def list_users(page: Optional[int] = Query(None, ge=1, description="1-based page number"),
               limit: Optional[int] = Query(None, ge=1, description="Page size"),
               search: Optional[str] = Query(None, description="Substring of name or email"),
               role: Optional[UserRole] = Query(None, description="Role filter"),
               is_active: Optional[str] = Query(None, alias="isActive", description="'true' or 'false'"),
               service: UserService = Depends(get_user_service), ):
    options = {"page": page, "limit": limit, "search": search, "role": role, "is_active": _parse_flag(is_active), }
    options = {key: value for key, value in options.items() if value is not None}

    try:
        return service.get_many(**options)
    except ServiceError:
        raise
    except Exception as exc:
        logger.exception("Error fetching users")
        return unexpected_error("Failed to fetch users", exc)


@router.post("", summary="Create a user.", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
             responses={**ERROR_RESPONSES, status.HTTP_409_CONFLICT: {"model": ErrorResponse}}, )
async def create_user(request: Request, service: UserService = Depends(get_user_service)):
    """
    Create a user from a JSON body ``{email, name?, avatar?, role?, metadata?}``.

    The body is parsed by hand so that malformed JSON, a missing email and
    a malformed email each get their own 400 message.
    """
    raw = await request.body()
    try:
        payload = json.loads(raw)
    except ValueError:
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid JSON", "Request body must be valid JSON")

    if not isinstance(payload, dict):
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid JSON", "Request body must be a JSON object")

    if not payload.get("email"):
        return error_response(status.HTTP_400_BAD_REQUEST, "Validation error", "email is required")

    try:
        data = UserCreate.model_validate(payload)
    except PydanticValidationError as exc:
        if any(err["loc"][:1] == ("email",) for err in exc.errors()):
            message = "Please provide a valid email address"
        else:
            message = format_validation_errors(exc.errors())
        return error_response(status.HTTP_400_BAD_REQUEST, "Validation error", message)

    try:
        user = await run_in_threadpool(service.create, data)
    except ServiceError:
        raise
    except Exception as exc:
        logger.exception("Error creating user")
        return unexpected_error("Failed to create user", exc, expose=False)

    return model_response(user, status_code=status.HTTP_201_CREATED)


@router.get("/stats", summary="Get user statistics.", response_model=UserStatsResponse, responses=ERROR_RESPONSES, )
def get_user_stats(service: UserService = Depends(get_user_service)):
    try:
        return service.get_stats()
    except Exception as exc:
        logger.exception("Error fetching user stats")
        return unexpected_error("Failed to fetch user statistics", exc, expose=False)


@router.get("/{user_id}", summary="Get a user by id.", response_model=UserWithCountsResponse,
            responses={**ERROR_RESPONSES, status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}, )
def get_user(user_id: str,
             include_relations: Optional[str] = Query(None, alias="includeRelations",
                                                      description="'true' to add post/comment counts"),
             service: UserService = Depends(get_user_service), ):
    """``_count`` is only present when ``includeRelations=true``."""
    try:
        user = service.get_by_id(user_id, include_relations=include_relations == "true")
    except Exception as exc:
        logger.exception("Error fetching user %s", user_id)
        return unexpected_error("Failed to fetch user", exc, expose=False)

    if user is None:
        raise NotFoundError("User not found")
    return model_response(user)


@router.patch("/{user_id}", summary="Update a user.", response_model=UserResponse,
              responses={**ERROR_RESPONSES, status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}, )
def update_user(user_id: str, data: UserUpdate, service: UserService = Depends(get_user_service)):
    try:
        return service.update(user_id, data)
    except ServiceError:
        raise
    except Exception as exc:
        logger.exception("Error updating user %s", user_id)
        return unexpected_error("Failed to update user", exc, expose=False)


@router.delete("/{user_id}", summary="Delete a user (soft by default).", response_model=UserResponse,
               responses={**ERROR_RESPONSES, status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}, )
def delete_user(user_id: str, soft: Optional[str] = Query(None, description="'false' for a permanent delete"),
                service: UserService = Depends(get_user_service), ):
    try:
        return service.delete(user_id, soft=soft != "false")
    except ServiceError:
        raise
    except Exception as exc:
        logger.exception("Error deleting user %s", user_id)
        return unexpected_error("Failed to delete user", exc, expose=False)
