"""Logging utilities for the Trello sessions service.

This module centralizes logger configuration for the application.
"""

import json
import logging
import uuid
from typing import Optional


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a configured logger instance."""
    logger_name = name or "trello_sessions"
    logger = logging.getLogger(logger_name)

    # Configure a basic console handler once so logs are visible when the
    # app runs outside a server that sets up its own handlers.
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    return logger


def generate_request_id() -> str:
    """Generate a unique request identifier for correlating logs."""

    return str(uuid.uuid4())


def _format_sessions_message(msg: str) -> str:
    """Prefix a log message with the sessions service tag."""

    return f"[TRELLO-SESSIONS] {msg}"


def _format_structured_message(
    message: str,
    request_id: Optional[str] = None,
    extra: Optional[dict] = None,
) -> str:
    """Format a log message as a JSON-like structured string."""

    payload: dict = {"message": message}
    if request_id is not None:
        payload["request_id"] = request_id
    if extra:
        payload["extra"] = extra
    return json.dumps(payload, default=str, ensure_ascii=False)


def log_info(
    msg: str,
    request_id: Optional[str] = None,
    **extra: object,
) -> None:
    """Log an informational message for sessions activity."""

    logger = get_logger("trello_sessions")
    structured = _format_structured_message(
        _format_sessions_message(msg),
        request_id=request_id,
        extra=extra or None,
    )
    logger.info(structured)


def log_warn(
    msg: str,
    request_id: Optional[str] = None,
    **extra: object,
) -> None:
    """Log a warning message for sessions activity."""

    logger = get_logger("trello_sessions")
    structured = _format_structured_message(
        _format_sessions_message(msg),
        request_id=request_id,
        extra=extra or None,
    )
    logger.warning(structured)


def log_error(
    msg: str,
    request_id: Optional[str] = None,
    **extra: object,
) -> None:
    """Log an error message for sessions activity."""

    logger = get_logger("trello_sessions")
    structured = _format_structured_message(
        _format_sessions_message(msg),
        request_id=request_id,
        extra=extra or None,
    )
    logger.error(structured)
