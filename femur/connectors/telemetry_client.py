"""
Telemetry client for femur.

Responsibilities:
- Turn duration measurements into log records
- Hand out one-argument reporters usable as a duration_cb
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from femur.logging.logger import get_logger
from femur.utils.timing import Resolution, ResolutionLike
from femur.utils.validators import validate_resolution


class TelemetryClient:
    """
    Lightweight telemetry client.

    Measurements are only logged; shipping them to a metrics backend is left
    to whatever handlers the host application attaches to the logger.
    """

    def __init__(
        self,
        component: str = "telemetry",
    ) -> None:
        self._component = component
        self._logger = get_logger(component)

    def log_duration(
        self,
        name: str,
        duration: float,
        resolution: ResolutionLike = Resolution.MS,
        attributes: Optional[Dict[str, Any]] = None,
        level: int = logging.INFO,
    ) -> None:
        """
        Log a single measurement.
        """
        unit = validate_resolution(resolution)
        self._logger.log(
            level,
            "span=%s duration=%s%s attrs=%s",
            name,
            duration,
            unit.value,
            attributes or {},
            extra={"span": name, "duration": duration, "resolution": unit.value},
        )

    def reporter(
        self,
        name: str,
        resolution: ResolutionLike = Resolution.MS,
        level: int = logging.INFO,
    ) -> Callable[[float], None]:
        """
        Return a duration_cb that logs each measurement under ``name``.
        """
        unit = validate_resolution(resolution)

        def report(duration: float) -> None:
            self.log_duration(name, duration, unit, level=level)

        return report
