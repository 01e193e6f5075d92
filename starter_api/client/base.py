"""
Shared HTTP client.

Thin wrapper over :mod:`httpx` that sends JSON, encodes query parameters
and turns non-2xx answers into :class:`ApiClientError`.
"""

from typing import Any, Mapping, Optional

import httpx
from pydantic_settings import BaseSettings, SettingsConfigDict

QueryParams = Mapping[str, Any]


class ClientSettings(BaseSettings):
    """Client configuration loaded from environment variables."""

    API_BASE_URL: str = "http://localhost:8000"
    API_TIMEOUT: float = 10.0

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


class ApiClientError(Exception):
    """Raised when the API answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _normalize_base_url(base_url: str) -> str:
    cleaned = (base_url or "").strip()
    if not cleaned:
        raise ValueError("API base URL must not be empty")
    return cleaned.rstrip("/")


def _encode_params(params: Optional[QueryParams]) -> dict[str, str]:
    """Drop ``None`` values and render booleans as ``true``/``false``."""
    encoded: dict[str, str] = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        else:
            encoded[key] = str(getattr(value, "value", value))
    return encoded


def _extract_error_message(payload: object, default: str) -> str:
    if isinstance(payload, dict):
        for key in ("message", "error"):
            value = payload.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
    if isinstance(payload, str) and payload.strip():
        return payload.strip()
    return default


class ApiClient:
    """
    JSON API client.

    Args:
        base_url: API origin, e.g. ``http://localhost:8000``. Defaults to
            ``API_BASE_URL`` from the environment.
        client: Pre-built ``httpx.Client``. When given without a
            ``base_url``, request paths are resolved against the client's
            own base URL (a FastAPI ``TestClient`` works here).
        timeout: Request timeout in seconds for the client built here.
    """

    def __init__(self, base_url: Optional[str] = None, client: Optional[httpx.Client] = None,
                 timeout: Optional[float] = None):
        client_settings = ClientSettings()
        if base_url is not None:
            self.base_url = _normalize_base_url(base_url)
        elif client is not None:
            self.base_url = ""
        else:
            self.base_url = _normalize_base_url(client_settings.API_BASE_URL)

        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout or client_settings.API_TIMEOUT)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def request(self, method: str, endpoint: str, params: Optional[QueryParams] = None,
                data: Any = None) -> Any:
        """
        Send a request and decode the JSON answer.

        Returns:
            Decoded JSON body, or ``{}`` when the answer is not JSON

        Raises:
            ApiClientError: On any non-2xx status
        """
        if not endpoint.startswith("/"):
            endpoint = "/" + endpoint

        response = self._client.request(method, f"{self.base_url}{endpoint}", params=_encode_params(params),
                                        json=data, headers={"Content-Type": "application/json"}, )

        if response.is_error:
            try:
                payload: object = response.json()
            except ValueError:
                payload = response.text
            raise ApiClientError(_extract_error_message(payload, "An error occurred"), response.status_code)

        if "application/json" not in response.headers.get("content-type", ""):
            return {}
        return response.json()

    def get(self, endpoint: str, params: Optional[QueryParams] = None) -> Any:
        return self.request("GET", endpoint, params=params)

    def post(self, endpoint: str, data: Any = None) -> Any:
        return self.request("POST", endpoint, data=data)

    def put(self, endpoint: str, data: Any = None) -> Any:
        return self.request("PUT", endpoint, data=data)

    def patch(self, endpoint: str, data: Any = None) -> Any:
        return self.request("PATCH", endpoint, data=data)

    def delete(self, endpoint: str, params: Optional[QueryParams] = None) -> Any:
        return self.request("DELETE", endpoint, params=params)
