"""
FEM error code registry for femur.

Each code has:
- description
- category (precondition|argument|config)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class ErrorInfo:
    code: str
    description: str
    category: str = "generic"


TIMER_NOT_STARTED = "FEM-TMR-0001"
INVALID_RESOLUTION = "FEM-ARG-0001"
INVALID_CONFIG = "FEM-CFG-0001"

# Core registry
_FEM_REGISTRY: Dict[str, ErrorInfo] = {
    # Timer
    TIMER_NOT_STARTED: ErrorInfo(
        TIMER_NOT_STARTED, "Cannot call duration without having called start()", "precondition"
    ),

    # Arguments
    INVALID_RESOLUTION: ErrorInfo(
        INVALID_RESOLUTION, "Must provide a valid resolution (s, ms, or ns)", "argument"
    ),

    # Config
    INVALID_CONFIG: ErrorInfo(INVALID_CONFIG, "Invalid logging configuration", "config"),
}


def get_error_info(code: str) -> ErrorInfo:
    """Return ErrorInfo for a given FEM code, or a generic one if not registered."""
    return _FEM_REGISTRY.get(
        code,
        ErrorInfo(code=code, description="Unknown femur error code"),
    )
