"""Per-card enrichment for the Trello sessions endpoint.

Turns a raw Trello card into a SessionRecord: host/co-host parsed from the
description, status and joinability derived from labels, and the parent
list's display name resolved through the Trello API.

Every function here works on a single card and shares no state, so the flow
can run them concurrently across the whole card set.
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple

import httpx

from src.config.settings import TrelloSettings
from src.core.errors import DegradedLookupError
from src.models.session import SessionRecord, TrelloCard, TrelloLabel
from src.services.trello import trello_get_list
from src.utils.format import safe_get
from src.utils.logger import log_warn

JOINABLE_LABEL = "JOINABLE"

_HOST_RE = re.compile(r"^[ \t]*Host:[ \t]*(.*)$", re.IGNORECASE | re.MULTILINE)
_CO_HOST_RE = re.compile(r"^[ \t]*Co-Host:[ \t]*(.*)$", re.IGNORECASE | re.MULTILINE)


def _first_value(pattern: re.Pattern, text: str) -> Optional[str]:
    match = pattern.search(text)
    if not match:
        return None
    value = match.group(1).strip()
    return value or None


def parse_card_description(description: Optional[str], placeholder: str = "Unknown") -> dict:
    """Extract ``host`` and ``coHost`` from a card description.

    Lines look like ``Host: Alice`` / ``co-host: Bob``; the label is matched
    case-insensitively at the start of a line and the value is the rest of
    that line, trimmed. Missing or empty values become ``placeholder``.
    """

    text = description if isinstance(description, str) else ""
    return {
        "host": _first_value(_HOST_RE, text) or placeholder,
        "coHost": _first_value(_CO_HOST_RE, text) or placeholder,
    }


def derive_label_status(
    labels: Sequence[TrelloLabel], placeholder: str = "N/A"
) -> Tuple[str, bool]:
    """Return ``(status, is_joinable)`` for a card's labels.

    A label named JOINABLE (any case) marks the card joinable and is never
    used as the status. The status is the first remaining label's name.
    """

    is_joinable = False
    remaining: List[TrelloLabel] = []
    for label in labels:
        if (label.name or "").strip().upper() == JOINABLE_LABEL:
            is_joinable = True
            continue
        remaining.append(label)

    if not remaining:
        return placeholder, is_joinable
    return remaining[0].name or "", is_joinable


async def _fetch_list_name(
    client: httpx.AsyncClient, list_id: Optional[str], settings: TrelloSettings
) -> str:
    if not list_id:
        raise DegradedLookupError(str(list_id), "card has no idList")

    result = await trello_get_list(client, list_id, settings)
    if not result.get("success"):
        if result.get("status") is None:
            raise DegradedLookupError(list_id, f"HTTP_ERROR: {result.get('error')}")
        raise DegradedLookupError(list_id, f"API_ERROR: {result.get('status')} {result.get('reason')}")

    name = safe_get(result, ["body", "name"])
    if not isinstance(name, str):
        raise DegradedLookupError(list_id, "response has no list name")
    return name


async def resolve_list_name(
    client: httpx.AsyncClient,
    list_id: Optional[str],
    settings: TrelloSettings,
    request_id: Optional[str] = None,
) -> str:
    """Return the display name of a list, or ``settings.unknown_list`` on any failure."""

    try:
        return await _fetch_list_name(client, list_id, settings)
    except DegradedLookupError as exc:
        log_warn(
            "List name lookup failed, using fallback",
            request_id=request_id,
            list_id=exc.list_id,
            reason=exc.reason,
        )
        return settings.unknown_list


async def enrich_card(
    client: httpx.AsyncClient,
    card: TrelloCard,
    position: int,
    settings: TrelloSettings,
    request_id: Optional[str] = None,
) -> SessionRecord:
    """Build the SessionRecord for one card.

    ``position`` is the card's 1-based position in the list as returned by
    Trello; the flow renumbers ``order`` after sorting.
    """

    hosts = parse_card_description(card.desc, settings.unknown_host)
    status, is_joinable = derive_label_status(card.labels, settings.no_status)
    list_name = await resolve_list_name(client, card.id_list, settings, request_id=request_id)

    return SessionRecord(
        id=card.id,
        order=position,
        name=card.name,
        status=status,
        due_date=card.due,
        host=hosts["host"],
        co_host=hosts["coHost"],
        list_name=list_name,
        is_joinable=is_joinable,
    )
