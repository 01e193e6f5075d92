"""
User API client.

Mirrors the ``/api/users`` endpoints and parses answers into the same
schemas the server returns.
"""

from typing import Optional, Union

from starter_api.client.base import ApiClient
from starter_api.models.user import UserRole
from starter_api.schemas.user import (UserCreate, UserListResponse, UserResponse, UserStatsResponse, UserUpdate,
                                      UserWithCountsResponse, )

USERS_ENDPOINT = "/api/users"


class UsersApi:
    """Callable wrapper around the user endpoints."""

    def __init__(self, client: ApiClient):
        self.client = client

    def create(self, data: UserCreate) -> UserResponse:
        payload = data.model_dump(mode="json", by_alias=True, exclude_unset=True)
        return UserResponse.model_validate(self.client.post(USERS_ENDPOINT, payload))

    def get_by_id(self, user_id: str,
                  include_relations: bool = False) -> Union[UserResponse, UserWithCountsResponse]:
        body = self.client.get(f"{USERS_ENDPOINT}/{user_id}", {"includeRelations": include_relations})
        if "_count" in body:
            return UserWithCountsResponse.model_validate(body)
        return UserResponse.model_validate(body)

    def get_many(self, page: Optional[int] = None, limit: Optional[int] = None, search: Optional[str] = None,
                 role: Optional[UserRole] = None, is_active: Optional[bool] = None, ) -> UserListResponse:
        params = {"page": page, "limit": limit, "search": search, "role": role, "isActive": is_active}
        return UserListResponse.model_validate(self.client.get(USERS_ENDPOINT, params))

    def update(self, user_id: str, data: UserUpdate) -> UserResponse:
        payload = data.model_dump(mode="json", by_alias=True, exclude_unset=True)
        return UserResponse.model_validate(self.client.patch(f"{USERS_ENDPOINT}/{user_id}", payload))

    def delete(self, user_id: str, soft: bool = True) -> UserResponse:
        body = self.client.delete(f"{USERS_ENDPOINT}/{user_id}", {"soft": soft})
        return UserResponse.model_validate(body)

    def get_stats(self) -> UserStatsResponse:
        return UserStatsResponse.model_validate(self.client.get(f"{USERS_ENDPOINT}/stats"))
