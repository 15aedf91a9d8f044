"""Small value-coercion helpers shared by the parsers."""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

T = TypeVar("T")

NULL = "\0"


def filter_string(value: Any) -> bool:
    """Return True if *value* is a non-empty string."""
    return isinstance(value, str) and value != ""


def filter_type(value: Any, predicate: Callable[[Any], bool], default: Optional[T] = None):
    """Return *value* when *predicate* accepts it, otherwise *default*."""
    return value if predicate(value) else default
