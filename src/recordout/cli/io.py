# topmark:header:start
#
#   file         : io.py
#   file_relpath : src/recordout/cli/io.py
#   project      : RecordOut
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input handling for the ``render`` command.

Records are read from a file, or from STDIN when the input is ``-``. Two layouts are
accepted:

- a single JSON array of objects;
- NDJSON: one JSON object per line (blank lines are ignored).

Every record must be a JSON object; key order is preserved and becomes the column
order when no explicit columns are given.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

from recordout.config.logging import RecordoutLogger, get_logger

logger: RecordoutLogger = get_logger(__name__)

STDIN_SENTINEL: str = "-"


class RecordInputError(ValueError):
    """Raised when input text does not hold a list of JSON objects."""


def parse_records(text: str) -> list[dict[str, Any]]:
    """Parse a JSON array or an NDJSON stream into a list of objects.

    Args:
        text (str): The raw input text.

    Returns:
        list[dict[str, Any]]: The records, in input order. Empty input yields ``[]``.

    Raises:
        json.JSONDecodeError: If the text (or an NDJSON line) is not valid JSON.
        RecordInputError: If the array holds something other than objects.
    """
    stripped: str = text.strip()
    if not stripped:
        return []

    items: list[Any]
    if stripped.startswith("["):
        items = json.loads(stripped)
        layout = "array"
    else:
        items = [json.loads(line) for line in stripped.splitlines() if line.strip()]
        layout = "ndjson"

    for index, item in enumerate(items, start=1):
        if not isinstance(item, dict):
            raise RecordInputError(
                f"record {index} is a JSON {type(item).__name__}, expected an object"
            )
    logger.debug("Parsed %d record(s) from JSON %s input", len(items), layout)
    return items


def read_records(source: str, *, encoding: str = "utf-8") -> list[dict[str, Any]]:
    """Read and parse records from a path, or from STDIN for ``-``.

    Args:
        source (str): Input path, or ``-`` for STDIN.
        encoding (str): Text encoding of a file input.

    Returns:
        list[dict[str, Any]]: The parsed records.
    """
    if source == STDIN_SENTINEL:
        text: str = sys.stdin.read()
    else:
        text = Path(source).read_text(encoding=encoding)
    return parse_records(text)
