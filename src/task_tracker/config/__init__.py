"""
Configuration management for Task Tracker.

Settings come from ``TASK_TRACKER_*`` environment variables or a ``.env``
file in the working directory.
"""

from .config_manager import ConfigManager, get_config, reload_config
from .settings import Settings

__all__ = ["ConfigManager", "get_config", "reload_config", "Settings"]
