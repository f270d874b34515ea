"""Application configuration via Pydantic Settings v2."""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings. Every field has a safe default."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Optional ===
    sentry_dsn: str = ""
    health_check_token: SecretStr = SecretStr("")

    # === Defaults ===
    log_level: str = "INFO"
    json_logs: bool = True
    port: int = 8080
    default_currency: Literal["EUR", "GBP", "USD"] = "EUR"

    @field_validator("log_level", mode="before")
    @classmethod
    def _log_level_must_be_known(cls, v: str) -> str:
        level = str(v).strip().upper()
        if level not in logging.getLevelNamesMapping():
            msg = f"LOG_LEVEL must be a logging level name, got {v!r}"
            raise ValueError(msg)
        return level

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for structlog's filtering logger."""
        return logging.getLevelNamesMapping()[self.log_level]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Singleton Settings instance (cached after first call)."""
    return Settings()
