"""Execution wrapper shared by the console script and ``python -m``.

:func:`main` turns every outcome of the root group into an integer exit code
and leaves the process-wide traceback flags and logging runtime as it found
them.
"""

from __future__ import annotations

import contextlib
import sys
from collections.abc import Callable, Iterator, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools

from pipeline_demo import __init__conf__
from pipeline_demo.adapters.logging.setup import stop_logging

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from pipeline_demo.composition import AppServices

TracebackState = tuple[bool, bool]
"""``(traceback, traceback_force_color)`` from ``lib_cli_exit_tools.config``."""


def apply_traceback_preferences(enabled: bool) -> None:
    """Switch full, coloured tracebacks on or off for lib_cli_exit_tools.

    Example:
        >>> apply_traceback_preferences(True)
        >>> lib_cli_exit_tools.config.traceback_force_color
        True
        >>> apply_traceback_preferences(False)
    """
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = enabled


def snapshot_traceback_state() -> TracebackState:
    cfg = lib_cli_exit_tools.config
    return bool(getattr(cfg, "traceback", False)), bool(getattr(cfg, "traceback_force_color", False))


def restore_traceback_state(state: TracebackState) -> None:
    lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = state


@contextlib.contextmanager
def _preserved_traceback_state(enabled: bool) -> Iterator[None]:
    saved = snapshot_traceback_state()
    try:
        yield
    finally:
        if enabled:
            restore_traceback_state(saved)


def _report_failure(exc: BaseException) -> int:
    """Print ``exc`` the lib_cli_exit_tools way and map it to an exit code."""
    verbose = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _dispatch(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    # lib_cli_exit_tools.run_cli has no way to hand Click an ``obj``.
    from .root import cli

    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # noqa: BLE001 - every other failure is reported, not raised
        return _report_failure(exc)
    return ExitCode.SUCCESS


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run ``pipeline-demo`` with ``argv`` (default ``sys.argv[1:]``) and return its exit code.

    ``services_factory`` supplies configuration and logging to subcommands;
    the console script passes ``build_production``. With
    ``restore_traceback`` the traceback flags are reset afterwards.

    Raises:
        ValueError: If services_factory is not provided.

    Example:
        >>> from pipeline_demo.composition import build_testing
        >>> main([], services_factory=build_testing)
        Hello World from Jenkins Pipeline!
        This is a scripted pipeline demo application.
        Hello, Jenkins! Welcome to our application.
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    args = list(sys.argv[1:] if argv is None else argv)
    try:
        with _preserved_traceback_state(restore_traceback):
            return _dispatch(args, services_factory)
    finally:
        stop_logging()


__all__ = [
    "TracebackState",
    "apply_traceback_preferences",
    "main",
    "restore_traceback_state",
    "snapshot_traceback_state",
]
