"""Configuration package for the Trello sessions service."""

from src.config.limits import (
    DEFAULT_BATCH_TIMEOUT,
    DEFAULT_MAX_CONCURRENCY,
    DEFAULT_REQUEST_TIMEOUT,
)
from src.config.settings import TrelloSettings

__all__ = [
    "DEFAULT_BATCH_TIMEOUT",
    "DEFAULT_MAX_CONCURRENCY",
    "DEFAULT_REQUEST_TIMEOUT",
    "TrelloSettings",
]
