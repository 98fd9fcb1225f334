"""Exit codes returned by :func:`pipeline_demo.adapters.cli.main.main`."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """0 for success (always the default banner run), 1 for failures, 2 for usage errors."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2


__all__ = ["ExitCode"]
