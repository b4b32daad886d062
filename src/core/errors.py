"""Error taxonomy for the Trello sessions flow.

Each error carries the HTTP status the endpoint should answer with, so the
FastAPI layer can map them without knowing the flow's internals.
"""

from __future__ import annotations

from typing import List, Optional


class TrelloSessionsError(Exception):
    """Base class for failures that end a sessions request."""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_payload(self) -> dict:
        payload: dict = {"error": self.message}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ConfigurationError(TrelloSessionsError):
    """Required credentials or identifiers are missing. Raised before any I/O."""

    status_code = 500

    def __init__(self, missing: List[str]) -> None:
        super().__init__(
            "Some required environment variables are not set on the server: " + ", ".join(missing)
        )
        self.missing = list(missing)


class NotFoundError(TrelloSessionsError):
    """The target list does not exist on the configured board."""

    status_code = 404

    def __init__(self, target_name: str) -> None:
        super().__init__(
            f'List "{target_name}" was not found on the board. Check the list name and board ID.'
        )
        self.target_name = target_name


class UpstreamError(TrelloSessionsError):
    """Trello answered a lists or cards fetch with a non-success status.

    Transport failures (no response at all) are reported as 502.
    """

    def __init__(
        self,
        operation: str,
        status_code: Optional[int],
        reason: str,
        details: str,
    ) -> None:
        super().__init__(f"Error while {operation} from Trello: {reason}", details=details)
        self.operation = operation
        self.status_code = status_code or 502
        self.reason = reason


class BatchTimeoutError(TrelloSessionsError):
    """The per-card enrichment batch did not finish within its deadline."""

    status_code = 504

    def __init__(self, timeout: float) -> None:
        super().__init__(
            "Timed out while enriching Trello cards.",
            details=f"Enrichment did not complete within {timeout:g}s",
        )
        self.timeout = timeout


class DegradedLookupError(Exception):
    """A per-card list-name lookup failed.

    Never leaves src.services.session_enrichment; the caller substitutes a
    fallback name.
    """

    def __init__(self, list_id: str, reason: str) -> None:
        super().__init__(f"List name lookup for {list_id} failed: {reason}")
        self.list_id = list_id
        self.reason = reason
