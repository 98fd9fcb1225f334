"""Logging adapter - lib_log_rich runtime lifecycle."""

from __future__ import annotations

from .setup import LoggingSettings, start_logging, stop_logging

__all__ = ["LoggingSettings", "start_logging", "stop_logging"]
