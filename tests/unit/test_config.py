"""Tests for app/config.py — Settings and get_settings singleton."""

import logging

import pytest
from pydantic import SecretStr, ValidationError

from app.config import Settings, get_settings

_ENV_VARS = ("SENTRY_DSN", "HEALTH_CHECK_TOKEN", "LOG_LEVEL", "JSON_LOGS", "PORT", "DEFAULT_CURRENCY")


@pytest.fixture
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear settings env vars that may leak from host OS."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)


def _make_settings(**overrides: object) -> Settings:
    return Settings(_env_file=None, **overrides)  # type: ignore[call-arg]


@pytest.mark.usefixtures("_clean_env")
class TestSettings:
    def test_defaults(self) -> None:
        s = _make_settings()
        assert s.sentry_dsn == ""
        assert s.health_check_token.get_secret_value() == ""
        assert s.log_level == "INFO"
        assert s.json_logs is True
        assert s.port == 8080
        assert s.default_currency == "EUR"

    def test_reads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEFAULT_CURRENCY", "GBP")
        monkeypatch.setenv("PORT", "9000")
        s = _make_settings()
        assert s.default_currency == "GBP"
        assert s.port == 9000

    def test_secret_str_hides_value(self) -> None:
        s = _make_settings(health_check_token="s3cret")
        assert isinstance(s.health_check_token, SecretStr)
        assert "s3cret" not in repr(s.health_check_token)

    def test_log_level_normalized(self) -> None:
        s = _make_settings(log_level=" debug ")
        assert s.log_level == "DEBUG"
        assert s.log_level_value == logging.DEBUG

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(ValidationError, match="LOG_LEVEL"):
            _make_settings(log_level="chatty")

    def test_unsupported_default_currency_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _make_settings(default_currency="JPY")


@pytest.mark.usefixtures("_clean_env")
class TestGetSettings:
    def test_cached_singleton(self) -> None:
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
