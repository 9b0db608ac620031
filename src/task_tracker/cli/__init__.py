"""Command-line interface for Task Tracker."""

from .main import app

__all__ = ["app"]
