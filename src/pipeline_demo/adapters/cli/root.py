"""Root command group.

Without a subcommand the banner is printed straight away: no configuration
file is read and no logging runtime is started, so nothing on the default
path can fail or write to stderr. Subcommands get configuration and logging
first.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click

from pipeline_demo import __init__conf__

from .commands import cli_add, cli_banner, cli_info, cli_welcome, emit_banner
from .constants import CLICK_CONTEXT_SETTINGS
from .main import apply_traceback_preferences

if TYPE_CHECKING:
    from pipeline_demo.composition import AppServices


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Print the banner, or prepare configuration and logging for a subcommand.

    Example:
        >>> from click.testing import CliRunner
        >>> from pipeline_demo.composition import build_testing
        >>> CliRunner().invoke(cli, [], obj=build_testing).exit_code
        0
    """
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        emit_banner()
        return

    services: AppServices = ctx.obj()
    services.start_logging(services.load_config())


for _command in (cli_add, cli_banner, cli_info, cli_welcome):
    cli.add_command(_command)


__all__ = ["cli"]
