"""Typed guards for reading loosely-shaped upstream JSON.

Each guard inspects one value and returns it with a known type, or a
stated default. Per-shape accessors in the normalizer modules chain
these explicitly so every default stays visible at the call site.
"""

from typing import Any, Optional


def as_dict(value: Any) -> dict:
    """The value if it is a JSON object, else an empty dict."""
    return value if isinstance(value, dict) else {}


def as_list(value: Any) -> list:
    """The value if it is a JSON array, else an empty list."""
    return value if isinstance(value, list) else []


def as_count(value: Any) -> int:
    """A non-negative count; missing or non-numeric values count as 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return int(value)
    return 0


def as_optional_int(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return int(value)


def as_optional_str(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    return None
