"""
Daily logging utility for Task Tracker.

This module provides a daily logging handler that writes one JSON object per
line and rolls over to a new file at midnight.
"""

import json
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOGGER_PREFIX = "task_tracker"

# Library default: stay silent until a handler is configured.
logging.getLogger(LOGGER_PREFIX).addHandler(logging.NullHandler())


class DailyJsonFormatter(logging.Formatter):
    """Custom JSON formatter for daily logs."""

    def __init__(self, component: Optional[str] = None):
        super().__init__()
        self.component = component

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "message": record.getMessage(),
            "file": record.filename,
            "line": record.lineno,
        }

        if self.component:
            log_record["component"] = self.component

        if hasattr(record, "json_data"):
            log_record.update(record.json_data)

        return json.dumps(log_record, default=str)


class DailyLogHandler(TimedRotatingFileHandler):
    """Daily rotating file handler with JSON formatting."""

    def __init__(self, log_dir: Union[str, Path], component: str, level: int):
        component_dir = Path(log_dir) / component
        component_dir.mkdir(parents=True, exist_ok=True)

        log_file = component_dir / f"{component}.log"

        super().__init__(
            filename=str(log_file),
            when="midnight",
            backupCount=30,  # Keep 30 days of logs
            encoding="utf-8",
        )

        self.setFormatter(DailyJsonFormatter(component=component))
        self.setLevel(level)


def setup_daily_logger(
    component: str, log_dir: Union[str, Path], level: int
) -> logging.Logger:
    """
    Set up a daily logger for a specific component.

    Args:
        component: Component name (e.g., 'manager', 'cli')
        log_dir: Base log directory
        level: Logging level

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(f"{LOGGER_PREFIX}.{component}")
    logger.setLevel(level)

    # Close and drop any existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    logger.addHandler(DailyLogHandler(log_dir, component, level))
    logger.propagate = False

    return logger


def get_daily_logger(component: str) -> logging.Logger:
    """
    Get an existing daily logger for a component.

    Args:
        component: Component name

    Returns:
        Logger instance
    """
    return logging.getLogger(f"{LOGGER_PREFIX}.{component}")


def get_manager_logger() -> logging.Logger:
    """Get the task manager daily logger."""
    return get_daily_logger("manager")


def get_cli_logger() -> logging.Logger:
    """Get the command line daily logger."""
    return get_daily_logger("cli")
