# topmark:header:start
#
#   project      : RecordOut
#   file         : version.py
#   file_relpath : src/recordout/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RecordOut `version` command.

Prints the current RecordOut version as installed in the active Python environment.
Machine formats render a single version record through the formatter itself.
"""

from __future__ import annotations

import platform
import sys
from dataclasses import dataclass, field

import click

from recordout.constants import RECORDOUT_VERSION
from recordout.core.fields import column
from recordout.core.formats import OutputFormat
from recordout.formatter import RecordFormatter

TEXT_FORMAT: str = "text"


@dataclass(frozen=True)
class VersionInfo:
    """Version record emitted by ``recordout version --format json|csv``."""

    tool: str
    version: str
    python: str = column("python_version", default_factory=platform.python_version)
    system: str = field(default_factory=platform.system)


@click.command(
    name="version",
    help="Show the current version of RecordOut.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([TEXT_FORMAT, *(f.value for f in OutputFormat)], case_sensitive=False),
    default=TEXT_FORMAT,
    show_default=True,
    help="Output format.",
)
def version_command(*, output_format: str = TEXT_FORMAT) -> None:
    """Show the current version of RecordOut.

    Args:
        output_format (str): ``text`` for the bare version string, or a record format.
    """
    if output_format.lower() == TEXT_FORMAT:
        click.echo(RECORDOUT_VERSION)
        return

    info = VersionInfo(tool="recordout", version=RECORDOUT_VERSION)
    RecordFormatter[VersionInfo](sys.stdout, output_format).write([info])
    if output_format.lower() == OutputFormat.JSON.value:
        # The JSON document has no trailing newline; end the line for the terminal.
        click.echo()
