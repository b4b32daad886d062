"""Trello sessions flow.

Reads the configured Trello board and turns the cards of one target list into
ordered SessionRecords:

1. Fetch the board's lists and pick the one whose name equals the target name.
2. Fetch that list's cards.
3. Enrich every card concurrently (bounded), waiting for the whole set.
4. Sort by due date, undated cards last, and number the result 1..n.

Lists and cards failures end the request with the upstream status. Per-card
list-name lookups degrade to a fallback name instead.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

import httpx

from src.config.settings import TrelloSettings
from src.controllers.fan_out import run_bounded
from src.core.errors import BatchTimeoutError, ConfigurationError, NotFoundError, UpstreamError
from src.models.session import BoardList, SessionRecord, TrelloCard
from src.services.session_enrichment import enrich_card
from src.services.trello import trello_get_list_cards, trello_get_lists
from src.utils.logger import log_error, log_info


def find_target_list(lists: Sequence[BoardList], target_name: str) -> Optional[BoardList]:
    """Return the first list whose name is exactly ``target_name``."""

    for board_list in lists:
        if board_list.name == target_name:
            return board_list
    return None


def _parse_due(due: Optional[str]) -> Optional[datetime]:
    if not due:
        return None
    try:
        parsed = datetime.fromisoformat(due.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


def sort_sessions_by_due_date(records: Sequence[SessionRecord]) -> List[SessionRecord]:
    """Sort sessions by due date ascending and renumber ``order`` from 1.

    Sessions without a (parseable) due date go last, keeping their relative
    order.
    """

    def _key(record: SessionRecord) -> tuple:
        due = _parse_due(record.due_date)
        return (due is None, due or _EARLIEST)

    ordered = sorted(records, key=_key)
    return [record.model_copy(update={"order": i}) for i, record in enumerate(ordered, start=1)]


def _raise_for_upstream(result: Dict[str, Any], operation: str, request_id: Optional[str], **context: object) -> None:
    if result.get("success"):
        return

    status = result.get("status")
    if status is None:
        reason = "Bad Gateway"
        details = str(result.get("error") or "")
    else:
        reason = str(result.get("reason") or "")
        details = str(result.get("text") or "")

    log_error(
        f"Error while {operation} from Trello",
        request_id=request_id,
        status=status,
        reason=reason,
        details=details,
        **context,
    )
    raise UpstreamError(operation, status, reason, details)


def _expect_list(result: Dict[str, Any], operation: str, request_id: Optional[str]) -> List[Dict[str, Any]]:
    body = result.get("body")
    if not isinstance(body, list):
        log_error(f"Unexpected response while {operation} from Trello", request_id=request_id)
        raise UpstreamError(operation, 502, "Unexpected response", str(result.get("text") or ""))
    return [item for item in body if isinstance(item, dict)]


async def _run_pipeline(
    client: httpx.AsyncClient,
    settings: TrelloSettings,
    request_id: Optional[str],
) -> List[SessionRecord]:
    board_id = settings.board_id or ""

    lists_result = await trello_get_lists(client, board_id, settings)
    _raise_for_upstream(lists_result, "fetching lists", request_id, board_id=board_id)
    lists = [BoardList.model_validate(item) for item in _expect_list(lists_result, "fetching lists", request_id)]

    target = find_target_list(lists, settings.target_list_name)
    if target is None:
        log_error(
            "Target list not found on board",
            request_id=request_id,
            board_id=board_id,
            target_list_name=settings.target_list_name,
        )
        raise NotFoundError(settings.target_list_name)

    cards_result = await trello_get_list_cards(client, target.id, settings)
    _raise_for_upstream(cards_result, "fetching cards", request_id, list_id=target.id)
    cards = [TrelloCard.model_validate(item) for item in _expect_list(cards_result, "fetching cards", request_id)]

    async def _enrich_one(card: TrelloCard, index: int) -> SessionRecord:
        return await enrich_card(client, card, index + 1, settings, request_id=request_id)

    try:
        records = await run_bounded(
            cards,
            _enrich_one,
            max_concurrency=settings.max_concurrency,
            timeout=settings.batch_timeout,
        )
    except asyncio.TimeoutError:
        log_error(
            "Card enrichment timed out",
            request_id=request_id,
            list_id=target.id,
            cards=len(cards),
            timeout=settings.batch_timeout,
        )
        raise BatchTimeoutError(settings.batch_timeout)

    sessions = sort_sessions_by_due_date(records)
    log_info(
        "Fetched Trello sessions",
        request_id=request_id,
        board_id=board_id,
        list_id=target.id,
        sessions=len(sessions),
    )
    return sessions


async def fetch_trello_sessions(
    settings: TrelloSettings,
    client: Optional[httpx.AsyncClient] = None,
    request_id: Optional[str] = None,
) -> List[SessionRecord]:
    """Return the ordered sessions for the configured board and target list.

    Raises:
        ConfigurationError: a required setting is missing (no request is made).
        UpstreamError: the lists or cards fetch failed.
        NotFoundError: the target list is not on the board.
        BatchTimeoutError: enrichment exceeded ``settings.batch_timeout``.
    """

    missing = settings.missing_fields()
    if missing:
        log_error("Required environment variables are not set", request_id=request_id, missing=missing)
        raise ConfigurationError(missing)

    if client is not None:
        return await _run_pipeline(client, settings, request_id)

    async with httpx.AsyncClient(timeout=httpx.Timeout(settings.request_timeout)) as owned_client:
        return await _run_pipeline(owned_client, settings, request_id)
