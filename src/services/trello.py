"""Trello service integration for the sessions endpoint.

This module exposes a small set of async helpers for reading boards, lists and
cards via the Trello REST API. Each helper performs exactly one HTTP call on a
caller-provided client and returns the normalized dict from
src.services.http.http_get.
"""

from __future__ import annotations

from typing import Any, Dict

import httpx

from src.config.settings import TrelloSettings
from src.services.http import http_get


_TRELLO_BASE_URL = "https://api.trello.com/1"

# Field projection requested for every card.
CARD_FIELDS = "name,desc,due,labels,idList"


def _auth_params(settings: TrelloSettings) -> Dict[str, str]:
    """Return Trello auth query parameters built from the settings."""

    params: Dict[str, str] = {}
    if settings.api_key:
        params["key"] = settings.api_key
    if settings.api_token:
        params["token"] = settings.api_token
    return params


async def trello_get_lists(
    client: httpx.AsyncClient, board_id: str, settings: TrelloSettings
) -> Dict[str, Any]:
    """List lists on a given Trello board."""

    params = _auth_params(settings)
    return await http_get(client, f"{_TRELLO_BASE_URL}/boards/{board_id}/lists", params=params)


async def trello_get_list_cards(
    client: httpx.AsyncClient, list_id: str, settings: TrelloSettings
) -> Dict[str, Any]:
    """List cards on a given Trello list with the session field projection."""

    params = _auth_params(settings)
    params["fields"] = CARD_FIELDS
    return await http_get(client, f"{_TRELLO_BASE_URL}/lists/{list_id}/cards", params=params)


async def trello_get_list(
    client: httpx.AsyncClient, list_id: str, settings: TrelloSettings
) -> Dict[str, Any]:
    """Fetch a single Trello list (used for its display name)."""

    params = _auth_params(settings)
    return await http_get(client, f"{_TRELLO_BASE_URL}/lists/{list_id}", params=params)
