"""
femur — Central Config Loader (Pydantic Settings)

This module centralizes the library's runtime knobs: default reporting
resolution and logging setup.

Usage:

from femur.config import settings

settings.DEFAULT_RESOLUTION  # Resolution.MS unless FEMUR_DEFAULT_RESOLUTION is set
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings

from femur.utils.exceptions import ConfigError
from femur.utils.timing import Resolution


class Settings(BaseSettings):
    """
    Central configuration using Pydantic Settings (v2).
    Overrides order:
    1. Environment variables (FEMUR_ prefix)
    2. .env file (optional)
    3. Defaults below
    """

    # -----------------------------
    # Identity
    # -----------------------------
    COMPONENT_NAME: str = Field("femur", description="Root logger namespace")

    # -----------------------------
    # Timing
    # -----------------------------
    DEFAULT_RESOLUTION: Resolution = Field(
        Resolution.MS, description="Unit passed to duration callbacks (s / ms / ns)"
    )

    # -----------------------------
    # Logging
    # -----------------------------
    LOG_LEVEL: str = "WARNING"
    LOGGING_YAML: str = ""
    DEBUG: bool = False

    class Config:
        env_prefix = "FEMUR_"
        env_file = ".env"
        env_file_encoding = "utf-8"

    # ------------------------------------------------------------------
    # YAML Loader Utilities
    # ------------------------------------------------------------------

    def load_yaml(self, path: str) -> Dict[str, Any]:
        """Load a YAML mapping (logging dictConfig)."""
        if not Path(path).exists():
            raise FileNotFoundError(f"YAML not found: {path}")
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping in {path}, got {type(data).__name__}")
        return data


# Create global settings instance
settings = Settings()

__all__ = ["Settings", "settings"]
