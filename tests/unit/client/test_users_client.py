"""Tests for the HTTP client wrapper, run against the app via TestClient."""

import pytest

from starter_api.client.base import ApiClient, ApiClientError, _encode_params, _extract_error_message
from starter_api.client.users import UsersApi
from starter_api.models.user import UserRole
from starter_api.schemas.user import UserCreate, UserUpdate, UserWithCountsResponse


@pytest.fixture
def users_api(client):
    return UsersApi(ApiClient(client=client))


# ======================================================================
# Helpers
# ======================================================================


class TestEncodeParams:
    def test_drops_none_and_renders_booleans(self):
        params = {"page": 2, "search": None, "isActive": True, "soft": False}
        assert _encode_params(params) == {"page": "2", "isActive": "true", "soft": "false"}

    def test_renders_enum_values(self):
        assert _encode_params({"role": UserRole.ADMIN}) == {"role": "ADMIN"}

    def test_empty(self):
        assert _encode_params(None) == {}


class TestExtractErrorMessage:
    def test_prefers_message(self):
        assert _extract_error_message({"error": "Conflict", "message": "taken"}, "x") == "taken"

    def test_falls_back_to_error(self):
        assert _extract_error_message({"error": "Invalid JSON"}, "x") == "Invalid JSON"

    def test_raw_text(self):
        assert _extract_error_message("Bad Gateway", "x") == "Bad Gateway"

    def test_default(self):
        assert _extract_error_message({}, "An error occurred") == "An error occurred"


class TestApiClient:
    def test_base_url_trailing_slash_removed(self):
        with ApiClient(base_url="http://localhost:8000/") as api:
            assert api.base_url == "http://localhost:8000"

    def test_empty_base_url_rejected(self):
        with pytest.raises(ValueError):
            ApiClient(base_url="  ")

    def test_injected_client_uses_relative_paths(self, client):
        assert ApiClient(client=client).base_url == ""


# ======================================================================
# UsersApi
# ======================================================================


class TestUsersApi:
    def test_create_and_get(self, users_api):
        created = users_api.create(UserCreate(email="test@example.com", name="Test"))

        assert created.email == "test@example.com"
        assert created.role == UserRole.USER
        assert users_api.get_by_id(created.id) == created

    def test_get_with_relations(self, users_api):
        created = users_api.create(UserCreate(email="test@example.com"))

        detail = users_api.get_by_id(created.id, include_relations=True)

        assert isinstance(detail, UserWithCountsResponse)
        assert detail.counts.posts == 0

    def test_get_many_filters(self, users_api):
        users_api.create(UserCreate(email="admin@example.com", role=UserRole.ADMIN))
        users_api.create(UserCreate(email="user@example.com"))

        result = users_api.get_many(role=UserRole.ADMIN, is_active=True, limit=5)

        assert result.total == 1
        assert result.users[0].email == "admin@example.com"
        assert result.has_more is False

    def test_update(self, users_api):
        created = users_api.create(UserCreate(email="test@example.com"))

        updated = users_api.update(created.id, UserUpdate(name="Renamed"))

        assert updated.name == "Renamed"

    def test_soft_and_hard_delete(self, users_api):
        created = users_api.create(UserCreate(email="test@example.com"))

        assert users_api.delete(created.id).is_active is False
        assert users_api.get_by_id(created.id).is_active is False

        users_api.delete(created.id, soft=False)
        with pytest.raises(ApiClientError) as exc_info:
            users_api.get_by_id(created.id)
        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "User not found"

    def test_conflict_raises(self, users_api):
        users_api.create(UserCreate(email="test@example.com"))

        with pytest.raises(ApiClientError) as exc_info:
            users_api.create(UserCreate(email="test@example.com"))

        assert exc_info.value.status_code == 409
        assert "already exists" in exc_info.value.message

    def test_stats(self, users_api):
        users_api.create(UserCreate(email="a@example.com"))

        stats = users_api.get_stats()

        assert stats.total_users == 1
        assert stats.active_users == 1
        assert stats.new_users_this_month == 1
