"""Root conftest — shared fixtures for all tests."""

from __future__ import annotations

import pytest

from app.config import Settings


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the host environment and any .env file."""
    return Settings(  # type: ignore[call-arg]
        _env_file=None,
        health_check_token="health_token_secret",  # noqa: S106
        json_logs=False,
        default_currency="EUR",
    )
