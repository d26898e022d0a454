"""
/**
 * @file pollyglot/utils/payload_utils.py
 * @description Helpers for pulling values out of loosely-shaped JSON payloads.
 */
"""

from typing import Any, Optional


def dig(data: Any, *path: Any) -> Any:
    """Walk nested dicts/lists by key or index, returning None at the first missing step."""
    current = data
    for step in path:
        if isinstance(step, int):
            if not isinstance(current, list) or not -len(current) <= step < len(current):
                return None
            current = current[step]
        else:
            if not isinstance(current, dict):
                return None
            current = current.get(step)
    return current


def first_text(data: Any, *keys: str) -> Optional[str]:
    """Return the first non-empty string value among ``keys`` of a dict payload."""
    if not isinstance(data, dict):
        return None
    for key in keys:
        value = data.get(key)
        if isinstance(value, str) and value.strip():
            return value
    return None


def is_blank(value: Optional[str]) -> bool:
    return not isinstance(value, str) or not value.strip()
