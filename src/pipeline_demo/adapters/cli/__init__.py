"""rich-click command-line interface."""

from __future__ import annotations

from .commands import cli_add, cli_banner, cli_info, cli_welcome, emit_banner
from .exit_codes import ExitCode
from .main import (
    TracebackState,
    apply_traceback_preferences,
    main,
    restore_traceback_state,
    snapshot_traceback_state,
)
from .root import cli

__all__ = [
    "ExitCode",
    "TracebackState",
    "apply_traceback_preferences",
    "cli",
    "cli_add",
    "cli_banner",
    "cli_info",
    "cli_welcome",
    "emit_banner",
    "main",
    "restore_traceback_state",
    "snapshot_traceback_state",
]
