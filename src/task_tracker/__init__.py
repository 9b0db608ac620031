"""
Task Tracker.

A local command-line task tracker that persists short text tasks to a JSON file.
"""

__version__ = "0.1.0"
