"""End-to-end tests for the users API against an in-memory database."""

import pytest

from starter_api.db.seed import seed


def _create(client, email: str, **fields):
    response = client.post("/api/users", json={"email": email, **fields})
    assert response.status_code == 201, response.text
    return response.json()


class TestUsersApi:
    def test_create_then_fetch(self, client):
        created = _create(client, "test@example.com", name="Test User")

        assert created["isActive"] is True
        assert created["role"] == "USER"
        assert created["createdAt"]

        fetched = client.get(f"/api/users/{created['id']}")
        assert fetched.status_code == 200
        assert fetched.json() == created

    def test_duplicate_email_is_409(self, client):
        first = _create(client, "existing@example.com", name="Original")

        response = client.post("/api/users", json={"email": "existing@example.com", "name": "Impostor"})

        assert response.status_code == 409
        assert "already exists" in response.json()["message"]
        assert client.get(f"/api/users/{first['id']}").json()["name"] == "Original"

    def test_list_with_pagination_and_search(self, client):
        for i in range(15):
            _create(client, f"user{i}@example.com", name=f"User {i}")

        page = client.get("/api/users?limit=2").json()
        assert len(page["users"]) == 2
        assert page["total"] == 15
        assert page["hasMore"] is True

        found = client.get("/api/users?search=USER1").json()
        # user1, user10 .. user14
        assert found["total"] == 6

    def test_update_soft_delete_and_filters(self, client):
        user = _create(client, "test@example.com")

        patched = client.patch(f"/api/users/{user['id']}", json={"role": "MODERATOR", "metadata": {"a": 1}})
        assert patched.status_code == 200
        assert patched.json()["role"] == "MODERATOR"
        assert patched.json()["metadata"] == {"a": 1}

        deleted = client.delete(f"/api/users/{user['id']}")
        assert deleted.status_code == 200
        assert deleted.json()["isActive"] is False

        assert client.get("/api/users?isActive=true").json()["total"] == 0
        assert client.get("/api/users?isActive=false").json()["total"] == 1

    @pytest.mark.parametrize("body", [{"isActive": None}, {"role": None}])
    def test_null_role_or_flag_is_400_and_row_unchanged(self, client, body):
        user = _create(client, "test@example.com")

        response = client.patch(f"/api/users/{user['id']}", json=body)

        assert response.status_code == 400
        assert "SQL" not in response.json()["message"]
        fetched = client.get(f"/api/users/{user['id']}").json()
        assert fetched["isActive"] is True
        assert fetched["role"] == "USER"

    def test_mixed_case_email_round_trips(self, client):
        created = _create(client, "Jane.Doe@Example.COM")

        assert created["email"] == "Jane.Doe@Example.COM"
        assert client.get(f"/api/users/{created['id']}").json()["email"] == "Jane.Doe@Example.COM"

    def test_hard_delete_then_404(self, client):
        user = _create(client, "test@example.com")

        deleted = client.delete(f"/api/users/{user['id']}?soft=false")
        assert deleted.status_code == 200
        assert deleted.json()["email"] == "test@example.com"

        assert client.get(f"/api/users/{user['id']}").status_code == 404
        assert client.delete(f"/api/users/{user['id']}?soft=false").status_code == 404

    @pytest.mark.parametrize("method", ["patch", "delete"])
    def test_missing_user_is_404(self, client, method):
        kwargs = {"json": {"name": "x"}} if method == "patch" else {}
        response = getattr(client, method)("/api/users/non-existent-id", **kwargs)

        assert response.status_code == 404
        assert response.json() == {"error": "Not found", "message": "User not found"}

    def test_stats(self, client):
        a = _create(client, "a@example.com")
        _create(client, "b@example.com")
        client.delete(f"/api/users/{a['id']}")

        stats = client.get("/api/users/stats").json()
        assert stats == {"totalUsers": 2, "activeUsers": 1, "newUsersThisMonth": 2}

    def test_relation_counts_after_seed(self, client, session):
        seed(session)

        users = client.get("/api/users?search=admin@example.com").json()["users"]
        assert len(users) == 1
        assert users[0]["_count"] == {"posts": 1, "comments": 1}

        detail = client.get(f"/api/users/{users[0]['id']}?includeRelations=true").json()
        assert detail["_count"] == {"posts": 1, "comments": 1}


class TestHealth:
    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["database"] == "ok"
