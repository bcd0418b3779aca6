"""
Structured logging utilities for femur.

All library modules use these helpers so records are consistent and can be
routed by the host application.

Log fields always present on femur records:
- func_name (qualified name of the wrapped function)
- span (reporter name, logging reporter only)
- duration / resolution (when a measurement exists)
- sampled (whether the call passed the sampling gate)
"""

from __future__ import annotations

import logging
import logging.config
from typing import Any, Dict, Optional

from femur.config import settings

_LOGGER_INITIALIZED = False

_CONTEXT_FIELDS = ("func_name", "span", "duration", "resolution", "sampled")

# Records are dropped silently until the host configures logging
logging.getLogger(settings.COMPONENT_NAME).addHandler(logging.NullHandler())


# -----------------------------------------------------------------------------
# 1. LOAD LOGGING.YAML (optional)
# -----------------------------------------------------------------------------
def configure_logging(path: Optional[str] = None, force: bool = False) -> None:
    """
    Configure logging once per process. Opt-in: the library never calls this
    itself, so host applications keep control of the root logger.

    Uses ``path`` (or ``settings.LOGGING_YAML``) as a dictConfig document when
    given, otherwise falls back to ``logging.basicConfig`` at ``LOG_LEVEL``.
    """
    global _LOGGER_INITIALIZED
    if _LOGGER_INITIALIZED and not force:
        return

    cfg_path = path or settings.LOGGING_YAML
    if cfg_path:
        logging.config.dictConfig(settings.load_yaml(cfg_path))
    else:
        logging.basicConfig(level=settings.LOG_LEVEL.upper())

    if settings.DEBUG:
        logging.getLogger(settings.COMPONENT_NAME).setLevel(logging.DEBUG)

    _LOGGER_INITIALIZED = True


# -----------------------------------------------------------------------------
# 2. STANDARD CONTEXT FILTER
# -----------------------------------------------------------------------------
class FemurContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        # Formatters referencing these fields must never fail on foreign records
        for a in _CONTEXT_FIELDS:
            if not hasattr(record, a):
                setattr(record, a, None)
        return True


# -----------------------------------------------------------------------------
# 3. GET LOGGER
# -----------------------------------------------------------------------------
def get_logger(name: str) -> logging.Logger:
    """
    Get a namespaced library logger.

    Parameters
    ----------
    name : str
        Suffix under the component namespace (e.g. "wrapper" -> "femur.wrapper").

    Returns
    -------
    logging.Logger
        Logger carrying the femur context filter.
    """
    logger = logging.getLogger(f"{settings.COMPONENT_NAME}.{name}")

    if not any(isinstance(f, FemurContextFilter) for f in logger.filters):
        logger.addFilter(FemurContextFilter())

    return logger


# -----------------------------------------------------------------------------
# 4. bind_call() — attach call context into logs
# -----------------------------------------------------------------------------
def bind_call(func_name: str, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    base: Dict[str, Any] = {"func_name": func_name}
    if extra:
        base.update(extra)
    return base


__all__ = ["FemurContextFilter", "bind_call", "configure_logging", "get_logger"]
