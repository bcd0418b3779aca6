"""
Exception hierarchy for femur.

Every error raised by the library itself is a FemurError carrying a FEM code.
Errors raised by wrapped functions are never converted.
"""

from __future__ import annotations

from typing import Optional

from femur.utils.error_codes import (
    INVALID_CONFIG,
    INVALID_RESOLUTION,
    TIMER_NOT_STARTED,
    ErrorInfo,
    get_error_info,
)


class FemurError(Exception):
    """Base exception for all library errors."""

    def __init__(self, code: str, message: Optional[str] = None) -> None:
        self.info: ErrorInfo = get_error_info(code)
        self.code: str = self.info.code
        self.category: str = self.info.category
        self.detail: str = message or self.info.description
        super().__init__(f"{self.code}: {self.detail}")


class TimerNotStartedError(FemurError, RuntimeError):
    """duration() was requested from a timer that was never started."""

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(TIMER_NOT_STARTED, message)


class InvalidResolutionError(FemurError, ValueError):
    """Resolution outside of s, ms and ns."""

    def __init__(self, resolution: object = None, message: Optional[str] = None) -> None:
        self.resolution = resolution
        if message is None and resolution is not None:
            message = f"Must provide a valid resolution (s, ms, or ns), got {resolution!r}"
        super().__init__(INVALID_RESOLUTION, message)


class ConfigError(FemurError, ValueError):
    """Logging or settings configuration errors."""

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(INVALID_CONFIG, message)
