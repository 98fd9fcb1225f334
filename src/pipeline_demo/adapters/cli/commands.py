"""Subcommands: banner, welcome, add and info.

Each command writes its result to stdout with ``click.echo``; log records go
to stderr through lib_log_rich once the root group has started it.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator

import lib_log_rich.runtime
import rich_click as click

from pipeline_demo import __init__conf__
from pipeline_demo.domain.behaviors import add, build_banner, format_welcome

from .constants import CLICK_CONTEXT_SETTINGS, SIGNED_ARGS_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def _job(command: str) -> Iterator[None]:
    """Bind the command name to log records while the runtime is up."""
    if not lib_log_rich.runtime.is_initialised():
        yield
        return
    with lib_log_rich.runtime.bind(job_id=f"cli-{command}", extra={"command": command}):
        yield


def emit_banner() -> None:
    """Print the three banner lines and nothing else.

    Example:
        >>> emit_banner()
        Hello World from Jenkins Pipeline!
        This is a scripted pipeline demo application.
        Hello, Jenkins! Welcome to our application.
    """
    for line in build_banner():
        click.echo(line)


@click.command("banner", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_banner() -> None:
    """Print the pipeline banner (same as running without a command)."""
    with _job("banner"):
        logger.info("Printing pipeline banner")
        emit_banner()


@click.command("welcome", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name", required=False)
def cli_welcome(name: str | None) -> None:
    """Greet NAME, or Anonymous when NAME is missing or blank.

    Example:
        >>> from click.testing import CliRunner
        >>> CliRunner().invoke(cli_welcome, ["Ada"]).output
        'Hello, Ada! Welcome to our application.\\n'
    """
    with _job("welcome"):
        logger.info("Formatting welcome message")
        click.echo(format_welcome(name))


@click.command("add", context_settings=SIGNED_ARGS_CONTEXT_SETTINGS)
@click.argument("a", type=int)
@click.argument("b", type=int)
def cli_add(a: int, b: int) -> None:
    """Print A + B as a signed 32-bit integer.

    Example:
        >>> from click.testing import CliRunner
        >>> CliRunner().invoke(cli_add, ["-5", "5"]).output
        '0\\n'
    """
    with _job("add"):
        logger.info("Adding %d and %d", a, b)
        click.echo(str(add(a, b)))


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved package metadata."""
    with _job("info"):
        logger.info("Displaying package information")
        __init__conf__.print_info()


__all__ = ["cli_add", "cli_banner", "cli_info", "cli_welcome", "emit_banner"]
