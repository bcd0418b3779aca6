"""
Re-export the public API for easier imports.

Usage:
    from femur import wrap, sample
"""

from .config import settings
from .connectors.telemetry_client import TelemetryClient
from .logging.logger import configure_logging
from .utils.decorators import log_duration, timed
from .utils.exceptions import (
    ConfigError,
    FemurError,
    InvalidResolutionError,
    TimerNotStartedError,
)
from .utils.timing import Resolution, Timer, start_timer
from .wrapper import sample, wrap

__all__ = [
    "wrap",
    "sample",
    "timed",
    "log_duration",
    "Timer",
    "start_timer",
    "Resolution",
    "TelemetryClient",
    "FemurError",
    "TimerNotStartedError",
    "InvalidResolutionError",
    "ConfigError",
    "settings",
    "configure_logging",
]
