"""
Centralized Configuration for simple-loc-compat

Type-safe settings using Pydantic Settings. Every field can be overridden
through an environment variable with the ``SIMPLE_LOC_`` prefix, e.g.
``SIMPLE_LOC_DEFAULT_LOCALE=de`` or ``SIMPLE_LOC_APP_DEFAULT_VALUE="n/a"``.
"""

import os
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from simple_loc.utils.app_logger import configure_logging


class LocalizationSettings(BaseSettings):
    """Translation lookup settings"""

    model_config = SettingsConfigDict(
        env_prefix="SIMPLE_LOC_",
        env_file=".env" if not os.getenv("DOCKER_CONTAINER") else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    default_locale: str = Field(
        default="en",
        description="Locale used when no locale has been selected"
    )
    locales_dir: Optional[Path] = Field(
        default=None,
        description="Directory of YAML translation files loaded at startup"
    )
    app_section: str = Field(
        default="app",
        description="Root section of the translation table for application entries"
    )
    app_default_value: Optional[str] = Field(
        default=None,
        description="Value returned for missing application entries without a literal default"
    )
    debug: bool = Field(
        default=False,
        description="Raise EntryFormatError from non-strict lookups instead of returning the raw entry"
    )
    log_level: str = Field(
        default="INFO",
        description="Log level of the simple_loc loggers"
    )

    @field_validator("default_locale", "app_section", mode="before")
    @classmethod
    def strip_value(cls, v):
        if v is None:
            return v
        return str(v).strip()

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        return str(v or "INFO").strip().upper()


settings = LocalizationSettings()


def get_settings() -> LocalizationSettings:
    """
    Get the global settings instance

    Returns:
        LocalizationSettings: The global settings instance
    """
    return settings


def reload_settings() -> LocalizationSettings:
    """
    Reload settings from environment (useful for testing)

    Returns:
        LocalizationSettings: New settings instance with reloaded values
    """
    global settings
    settings = LocalizationSettings()
    configure_logging(settings.log_level)
    return settings
