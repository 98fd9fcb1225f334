"""Shared CLI constants."""

from __future__ import annotations

from typing import Any, Final

#: Shared Click context flags so help output stays consistent across commands.
CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

#: Lets ``-5`` reach a positional argument instead of being parsed as an option.
SIGNED_ARGS_CONTEXT_SETTINGS: Final[dict[str, Any]] = {
    **CLICK_CONTEXT_SETTINGS,
    "ignore_unknown_options": True,
}

TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "SIGNED_ARGS_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]
