# topmark:header:start
#
#   project      : RecordOut
#   file         : main.py
#   file_relpath : src/recordout/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the ``recordout`` command.

Group-level options are resolved once: the log level comes from
``RECORDOUT_LOG_LEVEL`` when set, otherwise from ``-v``/``-q``.
"""

from __future__ import annotations

import click

from recordout.cli.commands.render import render_command
from recordout.cli.commands.version import version_command
from recordout.cli.options import common_verbose_options, resolve_verbosity
from recordout.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int) -> None:
    """Initialize shared state (log level) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = level
    setup_logging(level=level)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="RecordOut CLI: render records as JSON or CSV.",
)
@common_verbose_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int) -> None:
    """Entry point for the RecordOut CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet)

    if ctx.invoked_subcommand is None:
        click.echo("Hint: use 'recordout render [INPUT]' to render records.")
        click.echo()
        click.echo(ctx.get_help())


cli.add_command(render_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
