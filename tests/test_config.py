"""Tests for settings loading and random sources."""

import random

import pytest

from recommendations_backend.config import DatabaseSettings, Settings, get_settings
from recommendations_backend.services.random_source import SequenceRandom, default_random_source


class TestDatabaseSettings:
    def test_plain_postgres_url_uses_asyncpg(self):
        settings = DatabaseSettings(url="postgresql://user:pw@db:5432/recommendations")

        assert settings.url == "postgresql+asyncpg://user:pw@db:5432/recommendations"
        assert not settings.is_sqlite

    def test_sqlite_url_is_untouched(self):
        settings = DatabaseSettings(url="sqlite+aiosqlite:///./local.db")

        assert settings.url == "sqlite+aiosqlite:///./local.db"
        assert settings.is_sqlite


class TestEnvironment:
    def test_nested_values_come_from_environment(self, monkeypatch):
        monkeypatch.setenv("RECOMMENDATIONS_DATABASE_URL", "sqlite+aiosqlite:///env.db")
        monkeypatch.setenv("RECOMMENDATIONS_API_PORT", "8123")
        monkeypatch.setenv("RECOMMENDATIONS_LOG_LEVEL", "DEBUG")

        settings = Settings()

        assert settings.database.url == "sqlite+aiosqlite:///env.db"
        assert settings.api.port == 8123
        assert settings.logging.level == "DEBUG"

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()


class TestRandomSources:
    def test_sequence_random_cycles(self):
        source = SequenceRandom([0.1, 0.9])

        assert [source.random() for _ in range(4)] == [0.1, 0.9, 0.1, 0.9]

    @pytest.mark.parametrize("values", [[], [1.0], [-0.1]])
    def test_sequence_random_rejects_bad_values(self, values):
        with pytest.raises(ValueError):
            SequenceRandom(values)

    def test_default_source_is_system_random(self):
        source = default_random_source()

        assert isinstance(source, random.Random)
        assert 0.0 <= source.random() < 1.0
