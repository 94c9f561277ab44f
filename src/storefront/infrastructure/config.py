"""Application configuration loaded from the environment.

Every variable is prefixed with ``STOREFRONT_`` and may also come from
a ``.env`` file in the working directory.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Raised when configuration is missing or invalid."""


class Settings(BaseSettings):

    # Where the JSON host keeps its state files
    data_dir: Path = Path("data")

    # Initial owner, used only when the store is first created
    owner: str = "owner"

    # Initial refund window in ticks
    refund_window_ticks: int = Field(default=100, ge=0)

    # Logging
    log_level: str = "WARNING"
    log_format: str = "console"  # console or json

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @model_validator(mode="after")
    def validate_config(self) -> Settings:
        errors: list[str] = []
        if not self.owner.strip():
            errors.append("STOREFRONT_OWNER must not be empty")
        if self.log_level.upper() not in _LOG_LEVELS:
            errors.append(
                f"STOREFRONT_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {self.log_level!r}"
            )
        if self.log_format not in ("console", "json"):
            errors.append(
                f"STOREFRONT_LOG_FORMAT must be 'console' or 'json', got {self.log_format!r}"
            )
        if errors:
            raise ConfigurationError("; ".join(errors))
        return self


def get_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings()
