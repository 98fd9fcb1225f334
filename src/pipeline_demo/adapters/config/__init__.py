"""Configuration adapter - lib_layered_config loading for logging settings."""

from __future__ import annotations

from .loader import LOGGING_SECTION, load_config, logging_settings

__all__ = ["LOGGING_SECTION", "load_config", "logging_settings"]
