"""Formatting helpers for the Trello sessions service."""

from typing import Any, Dict, List, Optional


def safe_get(d: Dict[str, Any], path: List[Any], default: Optional[Any] = None) -> Any:
    """Safely traverse a nested dict using a list path.

    Similar to lodash's ``get`` helper. Returns ``default`` if any step in the
    path is missing or not a mapping.
    """

    current: Any = d
    for key in path:
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current
