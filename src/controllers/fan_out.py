"""Bounded fan-out controller for the Trello sessions service.

This module provides a reusable, domain-agnostic helper for running one async
action per item with a cap on how many run at once, and joining all of them
before returning.

Usage Pattern
-------------
Call ``run_bounded(items, action_callable, max_concurrency, timeout)`` where
``action_callable`` is an async function that processes exactly ONE item:

    async def action_callable(item, index) -> Any

The call returns the results in the same order as ``items``. It never returns
a partial result list:

- If any action raises, the remaining actions are cancelled and the exception
  propagates.
- If ``timeout`` elapses first, every pending action is cancelled and
  ``asyncio.TimeoutError`` propagates.

The controller keeps no state between calls.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, List, Optional, Sequence


async def run_bounded(
    items: Sequence[Any],
    action_callable: Callable[[Any, int], Awaitable[Any]],
    max_concurrency: int = 10,
    timeout: Optional[float] = None,
) -> List[Any]:
    """Run ``action_callable`` for every item, at most ``max_concurrency`` at a time.

    Args:
        items: The items to process.
        action_callable: Async function called as ``action_callable(item, index)``
            where ``index`` is the item's 0-based position in ``items``.
        max_concurrency: Maximum number of actions in flight (at least 1).
        timeout: Deadline in seconds for the whole batch, or None for no limit.

    Returns:
        The action results, in input order.
    """

    if not items:
        return []

    sem = asyncio.Semaphore(max(1, max_concurrency))

    async def _run_one(index: int, item: Any) -> Any:
        async with sem:
            return await action_callable(item, index)

    tasks = [asyncio.ensure_future(_run_one(i, item)) for i, item in enumerate(items)]
    try:
        results = await asyncio.wait_for(asyncio.gather(*tasks), timeout=timeout)
    except BaseException:
        for task in tasks:
            task.cancel()
        raise

    return list(results)
