"""Generic HTTP client helpers for the Trello sessions service.

The Trello service layer builds on these so every outbound call returns the
same normalized result dict instead of raising.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx


async def http_get(
    client: httpx.AsyncClient,
    url: str,
    params: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """Perform an HTTP GET request and return a normalized response dict.

    Keys:
        success: True for a 2xx response.
        status: HTTP status code, or None if no response was received.
        reason: HTTP reason phrase ("Not Found", ...), empty on transport errors.
        body: Parsed JSON, or the raw text if the body is not JSON.
        text: Raw response text (the upstream error body on failures).
        error: Transport error message, only set when no response arrived.
    """

    try:
        resp = await client.get(url, params=params, headers=headers)
    except httpx.RequestError as exc:  # network, protocol or timeout error
        return {"success": False, "status": None, "reason": "", "error": str(exc) or repr(exc)}

    body: Any
    try:
        body = resp.json()
    except ValueError:
        body = resp.text

    return {
        "success": resp.is_success,
        "status": resp.status_code,
        "reason": resp.reason_phrase,
        "body": body,
        "text": resp.text,
    }
