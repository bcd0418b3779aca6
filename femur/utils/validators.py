"""
Validation helpers.

Sample rates and the callability of wrapped functions are intentionally
not validated here; see wrapper.sample.
"""

from __future__ import annotations

from typing import Any, Sequence

from femur.utils.timing import Resolution, ResolutionLike, to_resolution


def validate_resolution(value: ResolutionLike) -> Resolution:
    return to_resolution(value)


def trailing_callback(args: Sequence[Any]) -> bool:
    """True when the last positional argument follows the trailing-callback convention."""
    return bool(args) and callable(args[-1])
