# topmark:header:start
#
#   project      : RecordOut
#   file         : render.py
#   file_relpath : src/recordout/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RecordOut `render` command.

Reads JSON records and renders them through `recordout.formatter.RecordFormatter`.

Examples:
  Render an NDJSON file as CSV on STDOUT:

    $ recordout render people.ndjson

  Pretty-print a JSON array into a file:

    $ curl -s https://example.invalid/people | recordout render -f json -o people.json

  Pick, order and relabel CSV columns:

    $ recordout render people.ndjson -c Name=full_name -c Age
"""

from __future__ import annotations

import json
from typing import Any

import click

from recordout.cli.errors import (
    RecordoutEncodingError,
    error_from_os_error,
)
from recordout.cli.io import STDIN_SENTINEL, RecordInputError, read_records
from recordout.cli.options import CONTEXT_SETTINGS, parse_column_specs
from recordout.config.logging import get_logger
from recordout.core.fields import FieldDescriptor
from recordout.core.formats import (
    OutputFormat,
    normalize_format_selector,
    resolve_output_format,
)
from recordout.destination import output_destination
from recordout.formatter import RecordFormatter

logger = get_logger(__name__)


@click.command(
    name="render",
    help="Render JSON or NDJSON records as JSON or CSV.",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
INPUT is a file holding a JSON array of objects or one JSON object per line;
use '-' (the default) to read from STDIN.

Unknown formats write nothing.
""",
)
@click.argument("input_path", metavar="INPUT", required=False, default=STDIN_SENTINEL)
@click.option(
    "--format",
    "-f",
    "output_format",
    default=OutputFormat.CSV.value,
    show_default=True,
    help=f"Output format ({', '.join(f.value for f in OutputFormat)}); case-insensitive.",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    default="",
    help="Write to this file (created with mode 0600) instead of STDOUT.",
)
@click.option(
    "--column",
    "-c",
    "columns",
    multiple=True,
    metavar="NAME[=LABEL]",
    help="CSV column to emit, optionally relabelled. Repeat to select and order columns.",
)
def render_command(
    *,
    input_path: str,
    output_format: str,
    output_path: str,
    columns: tuple[str, ...],
) -> None:
    """Render records read from INPUT.

    Args:
        input_path (str): Input file, or ``-`` for STDIN.
        output_format (str): Format selector passed to the formatter.
        output_path (str): Destination file; empty for STDOUT.
        columns (tuple[str, ...]): ``--column`` values.

    Raises:
        RecordoutEncodingError: If the input is malformed or cannot be encoded.
        RecordoutError: If reading the input or writing the output fails.
    """
    fields: list[FieldDescriptor] | None = parse_column_specs(columns)

    try:
        records: list[dict[str, Any]] = read_records(input_path)
    except OSError as exc:
        raise error_from_os_error(exc, action=f"cannot read {input_path}") from exc
    except (json.JSONDecodeError, RecordInputError, UnicodeDecodeError) as exc:
        raise RecordoutEncodingError(f"invalid input {input_path}: {exc}") from exc

    if resolve_output_format(output_format) is None and normalize_format_selector(output_format):
        logger.warning("Unknown output format %r: nothing written", output_format)

    try:
        with output_destination(output_path) as stream:
            RecordFormatter[dict[str, Any]](stream, output_format, fields=fields).write(records)
    except OSError as exc:
        target: str = output_path or "STDOUT"
        raise error_from_os_error(exc, action=f"cannot write {target}") from exc
    except (TypeError, ValueError) as exc:
        raise RecordoutEncodingError(f"cannot encode records: {exc}") from exc
