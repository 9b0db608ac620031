"""
Configuration manager for Task Tracker.

This module provides a cached, reloadable way to access settings.
"""

from typing import Optional

from .settings import Settings


class ConfigManager:
    """Manages configuration loading and access."""

    def __init__(self) -> None:
        self._settings: Optional[Settings] = None

    def load_config(self) -> Settings:
        """Load configuration from the environment and ``.env``.

        Returns:
            Settings object with loaded configuration

        Raises:
            pydantic.ValidationError: If configuration validation fails
        """
        if self._settings is None:
            self._settings = Settings()
        return self._settings

    def get_config(self) -> Settings:
        """Get the current configuration."""
        return self.load_config()

    def reload_config(self) -> Settings:
        """Discard cached settings and load them again."""
        self._settings = None
        return self.load_config()


_config_manager = ConfigManager()


def get_config() -> Settings:
    """Get the process-wide configuration."""
    return _config_manager.get_config()


def reload_config() -> Settings:
    """Reload the process-wide configuration."""
    return _config_manager.reload_config()
