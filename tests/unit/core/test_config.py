"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from starter_api.core.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/app")
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        settings = Settings(_env_file=None)

        assert settings.DATABASE_URL == "postgresql://u:p@db:5432/app"
        assert settings.API_PREFIX == "/api"
        assert settings.DATABASE_POOL_SIZE == 5
        assert settings.LOG_LEVEL == "INFO"
        assert settings.CORS_ORIGINS == []

    def test_database_url_required(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_list_from_json_env(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", '["http://localhost:3000"]')

        settings = Settings(_env_file=None)

        assert settings.CORS_ORIGINS == ["http://localhost:3000"]
