"""Runtime settings for the Trello sessions service.

Settings are read from the environment once at startup and passed explicitly
into the request flow, so tests can inject their own values.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Mapping, Optional

from src.config.limits import (
    DEFAULT_BATCH_TIMEOUT,
    DEFAULT_MAX_CONCURRENCY,
    DEFAULT_REQUEST_TIMEOUT,
    MAX_CONCURRENCY,
    MAX_TIMEOUT,
    MIN_CONCURRENCY,
    MIN_TIMEOUT,
)


DEFAULT_TARGET_LIST_NAME = "Nadcházející tréninky"
DEFAULT_UNKNOWN_HOST = "Unknown"
DEFAULT_NO_STATUS = "N/A"
DEFAULT_UNKNOWN_LIST = "Unknown list"

_REQUIRED = (
    ("api_key", "TRELLO_API_KEY"),
    ("api_token", "TRELLO_API_TOKEN"),
    ("board_id", "TRELLO_BOARD_ID"),
)


def _clean(value: Optional[str]) -> Optional[str]:
    v = (value or "").strip()
    return v or None


def _float_setting(raw: Optional[str], default: float) -> float:
    try:
        value = float(raw) if raw is not None else default
    except ValueError:
        return default
    return min(max(value, MIN_TIMEOUT), MAX_TIMEOUT)


def _int_setting(raw: Optional[str], default: int) -> int:
    try:
        value = int(raw) if raw is not None else default
    except ValueError:
        return default
    return min(max(value, MIN_CONCURRENCY), MAX_CONCURRENCY)


@dataclass(frozen=True)
class TrelloSettings:
    """Credentials, board selection and tuning knobs for one deployment.

    Attributes:
        api_key: Trello API key.
        api_token: Trello API token.
        board_id: Board whose lists are searched for the target list.
        target_list_name: Exact (case-sensitive) name of the list to read.
        unknown_host: Placeholder when a card has no Host/Co-Host line.
        no_status: Placeholder when a card has no status label.
        unknown_list: Fallback when the list-name lookup fails.
        request_timeout: Per-call timeout in seconds.
        batch_timeout: Deadline in seconds for the whole enrichment batch.
        max_concurrency: Concurrent list-name lookups.
    """

    api_key: Optional[str] = None
    api_token: Optional[str] = None
    board_id: Optional[str] = None
    target_list_name: str = DEFAULT_TARGET_LIST_NAME
    unknown_host: str = DEFAULT_UNKNOWN_HOST
    no_status: str = DEFAULT_NO_STATUS
    unknown_list: str = DEFAULT_UNKNOWN_LIST
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    batch_timeout: float = DEFAULT_BATCH_TIMEOUT
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TrelloSettings":
        """Build settings from environment variables (or any mapping)."""

        env = os.environ if environ is None else environ
        return cls(
            api_key=_clean(env.get("TRELLO_API_KEY")),
            api_token=_clean(env.get("TRELLO_API_TOKEN")),
            board_id=_clean(env.get("TRELLO_BOARD_ID")),
            target_list_name=env.get("TRELLO_TARGET_LIST_NAME") or DEFAULT_TARGET_LIST_NAME,
            unknown_host=env.get("TRELLO_UNKNOWN_HOST") or DEFAULT_UNKNOWN_HOST,
            no_status=env.get("TRELLO_NO_STATUS") or DEFAULT_NO_STATUS,
            unknown_list=env.get("TRELLO_UNKNOWN_LIST") or DEFAULT_UNKNOWN_LIST,
            request_timeout=_float_setting(env.get("TRELLO_REQUEST_TIMEOUT"), DEFAULT_REQUEST_TIMEOUT),
            batch_timeout=_float_setting(env.get("TRELLO_BATCH_TIMEOUT"), DEFAULT_BATCH_TIMEOUT),
            max_concurrency=_int_setting(env.get("TRELLO_MAX_CONCURRENCY"), DEFAULT_MAX_CONCURRENCY),
        )

    def missing_fields(self) -> List[str]:
        """Return the environment variable names of unset required settings."""

        return [env_name for attr, env_name in _REQUIRED if not getattr(self, attr)]
