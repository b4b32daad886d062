"""Session presenter for the Trello sessions endpoint.

Pure presentation layer: converts SessionRecords and flow errors into the
JSON bodies returned to the front-end. No business logic, no side effects.
"""

from typing import Any, Dict, List, Optional, Sequence

from src.core.errors import TrelloSessionsError
from src.models.session import SessionRecord


def present_sessions(records: Sequence[SessionRecord]) -> List[Dict[str, Any]]:
    """Serialize sessions with camelCase keys, keeping their order.

    Example:
        >>> present_sessions([record])
        [{"id": "C1", "order": 1, "name": "Clinic", "status": "Beginner",
          "dueDate": "2024-06-01T00:00:00Z", "host": "Alice", "coHost": "Bob",
          "listName": "Sessions", "isJoinable": True}]
    """

    return [record.to_public_dict() for record in records]


def present_error(exc: TrelloSessionsError) -> Dict[str, Any]:
    """Return ``{"error": ...}`` plus ``details`` when the error carries any."""

    return exc.to_payload()


def present_unexpected_error(exc: Optional[BaseException]) -> Dict[str, Any]:
    """Body for failures nothing else handled."""

    return {
        "error": "Internal server error while processing the request.",
        "details": str(exc) if exc is not None else "",
    }
