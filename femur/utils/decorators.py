"""
Decorator forms of the timing wrappers.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, TypeVar

from femur.config import settings
from femur.connectors.telemetry_client import TelemetryClient
from femur.utils.timing import ResolutionLike
from femur.utils.validators import validate_resolution
from femur.wrapper import DurationCallback, sample

F = TypeVar("F", bound=Callable[..., Any])


def timed(
    duration_cb: DurationCallback,
    *,
    rate: float = 1.0,
    context: Any = None,
    resolution: Optional[ResolutionLike] = None,
) -> Callable[[F], F]:
    """
    Decorator that reports the duration of sampled calls to ``duration_cb``.

    Usage:
        @timed(durations.append, rate=0.1)
        def fetch(key, cb):
            ...
    """

    def decorator(func: F) -> F:
        return sample(rate, func, duration_cb, context, resolution=resolution)

    return decorator


def log_duration(
    name: Optional[str] = None,
    *,
    rate: float = 1.0,
    level: int = logging.INFO,
    resolution: Optional[ResolutionLike] = None,
) -> Callable[[F], F]:
    """
    Decorator that logs the duration of sampled calls.

    Usage:
        @log_duration("store.get", rate=0.5)
        def get(key):
            ...
    """
    unit = validate_resolution(
        resolution if resolution is not None else settings.DEFAULT_RESOLUTION
    )
    client = TelemetryClient()

    def decorator(func: F) -> F:
        span = name or getattr(func, "__qualname__", repr(func))
        return sample(rate, func, client.reporter(span, unit, level), resolution=unit)

    return decorator
