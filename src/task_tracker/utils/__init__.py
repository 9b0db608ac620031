"""Utility helpers for Task Tracker."""

from .daily_logger import (
    get_cli_logger,
    get_daily_logger,
    get_manager_logger,
    setup_daily_logger,
)

__all__ = [
    "get_cli_logger",
    "get_daily_logger",
    "get_manager_logger",
    "setup_daily_logger",
]
