"""Centralized settings management for amplitude_event."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Package settings powered by pydantic-settings.

    Values are read from ``AMPLITUDE_EVENT_*`` environment variables and an
    optional ``.env`` file in the working directory.
    """

    # -------------------------------------------------------------------------
    # ENVIRONMENT
    # -------------------------------------------------------------------------
    ENV: str = "development"

    # -------------------------------------------------------------------------
    # LOGGING
    # -------------------------------------------------------------------------
    LOG_LEVEL: str = "INFO"
    # None: JSON logs everywhere except the development environment
    LOG_JSON: bool | None = None

    # -------------------------------------------------------------------------
    # PATHS
    # -------------------------------------------------------------------------
    # CONFIG_DIR points to src/amplitude_event/configs
    CONFIG_DIR: Path = Path(__file__).resolve().parent

    KNOWN_FIELDS_PATH: Path = CONFIG_DIR / "known_fields.yaml"

    # -------------------------------------------------------------------------
    # CONFIGURATION
    # -------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_prefix="AMPLITUDE_EVENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        # Allow extra fields in .env but ignore them in the model
        extra="ignore",
    )

    @property
    def json_logs(self) -> bool:
        """Whether log lines are rendered as JSON."""
        if self.LOG_JSON is not None:
            return self.LOG_JSON
        return self.ENV != "development"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached package settings.

    Returns
    -------
    Settings
        The singleton settings instance.
    """
    return Settings()
