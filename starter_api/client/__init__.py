"""HTTP client mirroring the user endpoints."""

from starter_api.client.base import ApiClient, ApiClientError
from starter_api.client.users import UsersApi

__all__ = [
    "ApiClient",
    "ApiClientError",
    "UsersApi",
]
