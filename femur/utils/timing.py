"""
Timing utilities: a monotonic, nanosecond-precision stopwatch.

Usage:

    timer = start_timer()
    # do work...
    elapsed = timer.duration("ms")
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Union

from femur.utils.exceptions import InvalidResolutionError, TimerNotStartedError


class Resolution(str, Enum):
    """Units a duration can be expressed in."""

    S = "s"
    MS = "ms"
    NS = "ns"


ResolutionLike = Union[Resolution, str]

# Nanoseconds per unit; durations are floored to the unit.
_NS_PER_UNIT: Dict[Resolution, int] = {
    Resolution.S: 1_000_000_000,
    Resolution.MS: 1_000_000,
    Resolution.NS: 1,
}


def to_resolution(value: ResolutionLike) -> Resolution:
    """Coerce a string or Resolution into a Resolution, or raise InvalidResolutionError."""
    if isinstance(value, Resolution):
        return value
    try:
        return Resolution(value)
    except ValueError:
        raise InvalidResolutionError(value) from None


@dataclass
class Timer:
    """
    Stopwatch over time.perf_counter_ns().

    duration() may be called any number of times after start(); every call
    measures from the same start point.
    """

    _start_ns: Optional[int] = field(default=None, repr=False)

    def start(self) -> None:
        self._start_ns = time.perf_counter_ns()

    @property
    def started(self) -> bool:
        return self._start_ns is not None

    def duration(self, resolution: Optional[ResolutionLike] = Resolution.MS) -> int:
        """
        Return elapsed time since start() in the requested unit.

        The sub-unit remainder is discarded, e.g. 1.9ms reports as 1. A
        resolution of None means milliseconds.

        Raises
        ------
        TimerNotStartedError
            start() was never called.
        InvalidResolutionError
            resolution is not one of s, ms, ns.
        """
        if self._start_ns is None:
            raise TimerNotStartedError()
        elapsed_ns = time.perf_counter_ns() - self._start_ns
        return elapsed_ns // _NS_PER_UNIT[to_resolution(resolution or Resolution.MS)]

    @property
    def elapsed_ms(self) -> int:
        return self.duration(Resolution.MS)


def start_timer() -> Timer:
    """Return a started Timer instance."""
    timer = Timer()
    timer.start()
    return timer
