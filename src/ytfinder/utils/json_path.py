"""Total accessors for walking untyped JSON trees."""

from typing import Any, List, Optional, Union

Key = Union[str, int]


def dig(obj: Any, *keys: Key) -> Any:
    """Follow ``keys`` through nested dicts and lists.

    String keys index dicts, integer keys index lists. Returns None at the
    first link that is missing or has the wrong type.

    Args:
        obj: Parsed JSON value to start from
        *keys: Path to follow

    Returns:
        The value at the end of the path, or None
    """
    current = obj
    for key in keys:
        if isinstance(key, int):
            if not isinstance(current, list) or not -len(current) <= key < len(current):
                return None
            current = current[key]
        else:
            if not isinstance(current, dict):
                return None
            current = current.get(key)
        if current is None:
            return None
    return current


def dig_list(obj: Any, *keys: Key) -> List[Any]:
    """Like dig, but always returns a list (empty when absent)."""
    result = dig(obj, *keys)
    return result if isinstance(result, list) else []


def dig_text(obj: Any, *keys: Key) -> Optional[str]:
    """Like dig, but returns only non-empty strings."""
    result = dig(obj, *keys)
    if isinstance(result, str) and result:
        return result
    return None
