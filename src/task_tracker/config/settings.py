"""
Pydantic settings model for Task Tracker configuration.

This module defines the configuration schema using pydantic-settings for
validation and environment variable overrides.
"""

import logging
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="TASK_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    file: Path = Field(default=Path("tasks.json"), description="Backing task file")
    log_dir: Optional[Path] = Field(default=None, description="Directory for JSON logs")
    log_level: str = Field(default="INFO", description="Log level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        if v.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of {VALID_LOG_LEVELS}")
        return v.upper()

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)
