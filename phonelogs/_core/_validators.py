"""Validation helpers run before any request is built."""

from __future__ import annotations

from typing import Any

from ..exceptions import InvalidArgument


def require_non_empty(value: Any, argument: str) -> None:
    """Raise ``InvalidArgument`` if *value* is missing or empty."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidArgument(argument, "must not be empty")


def require_in_range(value: int, min_val: int, max_val: int, argument: str) -> None:
    """Raise ``InvalidArgument`` unless ``min_val <= value <= max_val``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(argument, f"must be an integer (got: {value!r})")
    if not min_val <= value <= max_val:
        raise InvalidArgument(
            argument, f"must be between {min_val} and {max_val} (got: {value!r})"
        )
