"""Presenters package for the Trello sessions service."""

from src.presenters.session_presenter import (
    present_error,
    present_sessions,
    present_unexpected_error,
)

__all__ = [
    "present_error",
    "present_sessions",
    "present_unexpected_error",
]
