# topmark:header:start
#
#   file         : options.py
#   file_relpath : src/recordout/cli/options.py
#   project      : RecordOut
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the RecordOut CLI.

This module centralizes reusable options (verbosity, column selection) and their
resolution logic, so commands and groups can stay thin. The helpers here are
Click-aware.
"""

import logging
from typing import Callable, Iterable, ParamSpec, TypeVar

import click

from recordout.cli.errors import RecordoutUsageError
from recordout.config.logging import TRACE_LEVEL, get_logger
from recordout.core.fields import FieldDescriptor

P = ParamSpec("P")
R = TypeVar("R")

logger = get_logger(__name__)

#: Click context settings shared by all commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level based on verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level as an integer.

    Raises:
        RecordoutUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level, two set DEBUG, one sets INFO.
        One or more -q flags set ERROR level. Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise RecordoutUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO

    if quiet_count >= 1:  # -q
        return logging.ERROR

    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors.",
    )(f)
    return f


def parse_column_spec(spec: str) -> FieldDescriptor:
    """Parse a ``--column`` value of the form ``NAME`` or ``NAME=LABEL``.

    Args:
        spec: The raw option value.

    Returns:
        The field descriptor for the column.

    Raises:
        RecordoutUsageError: If the field name is empty.
    """
    name, sep, label = spec.partition("=")
    name = name.strip()
    if not name:
        raise RecordoutUsageError(f"Invalid --column value {spec!r}: expected NAME or NAME=LABEL.")
    return FieldDescriptor(name=name, label=label.strip() if sep else None)


def parse_column_specs(specs: Iterable[str]) -> list[FieldDescriptor] | None:
    """Parse all ``--column`` values; None when no column was given."""
    columns: list[FieldDescriptor] = [parse_column_spec(spec) for spec in specs]
    if columns:
        logger.debug("Explicit columns: %s", [c.header for c in columns])
    return columns or None
