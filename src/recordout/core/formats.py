# topmark:header:start
#
#   project      : RecordOut
#   file         : formats.py
#   file_relpath : src/recordout/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output formats understood by `recordout.formatter.RecordFormatter`.

Format selectors are free-form strings. They are compared after trimming surrounding
whitespace and lowercasing; an empty or unknown selector selects no format at all,
which callers treat as "write nothing".
"""

from __future__ import annotations

from enum import Enum

from recordout.config.logging import RecordoutLogger, get_logger

logger: RecordoutLogger = get_logger(__name__)


class OutputFormat(str, Enum):
    """Record output formats.

    Members:
      JSON: A single indented JSON array of per-record objects.
      CSV: A header row followed by one comma-separated row per record.
    """

    JSON = "json"
    CSV = "csv"


def normalize_format_selector(selector: str | None) -> str:
    """Return ``selector`` trimmed and lowercased (``None`` becomes ``""``)."""
    return (selector or "").strip().lower()


def resolve_output_format(selector: str | None) -> OutputFormat | None:
    """Map a free-form format selector onto an `OutputFormat`.

    Args:
        selector (str | None): User-supplied selector, e.g. ``" CSV "``.

    Returns:
        OutputFormat | None: The matching format, or None for an empty or
        unrecognized selector.
    """
    key: str = normalize_format_selector(selector)
    if not key:
        return None
    try:
        return OutputFormat(key)
    except ValueError:
        logger.debug("Unrecognized output format %r: nothing will be written", selector)
        return None
