"""Tests for settings loading."""

import pytest

from exercism.config import DEFAULT_EXTENSIONS, ExercismSettings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestExercismSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("EXERCISM_DATABASE_URL", raising=False)
        settings = ExercismSettings(_env_file=None)
        assert settings.database_url == "sqlite+aiosqlite:///./exercism.db"
        assert settings.log_level == "INFO"
        assert settings.extensions == DEFAULT_EXTENSIONS
        assert settings.curricula == {}

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("EXERCISM_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
        monkeypatch.setenv("EXERCISM_LOG_JSON", "false")
        monkeypatch.setenv("EXERCISM_CURRICULA", '{"ruby": ["bob"]}')
        settings = ExercismSettings(_env_file=None)
        assert settings.database_url == "sqlite+aiosqlite:///:memory:"
        assert settings.log_json is False
        assert settings.curricula == {"ruby": ["bob"]}

    def test_default_extensions_are_copied(self):
        settings = ExercismSettings(_env_file=None)
        settings.extensions["zz"] = "zlang"
        assert "zz" not in DEFAULT_EXTENSIONS


class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_cache_clear_rereads_environment(self, monkeypatch):
        monkeypatch.setenv("EXERCISM_LOG_LEVEL", "DEBUG")
        assert get_settings().log_level == "DEBUG"
        monkeypatch.setenv("EXERCISM_LOG_LEVEL", "WARNING")
        get_settings.cache_clear()
        assert get_settings().log_level == "WARNING"
