# topmark:header:start
#
#   project      : RecordOut
#   file         : destination.py
#   file_relpath : src/recordout/destination.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Destination streams for rendered records.

- An empty (or missing) name selects standard output, which callers must not close.
- Any other name is a file path, opened for writing: created if absent (owner
  read/write only), truncated if present. The caller owns the returned stream.

`output_destination` wraps both cases in a context manager that closes the stream on
every exit path when, and only when, it is a file.
"""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING

from recordout.config.logging import RecordoutLogger, get_logger
from recordout.constants import DESTINATION_FILE_MODE

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path
    from typing import TextIO

logger: RecordoutLogger = get_logger(__name__)


def is_stdout_destination(name: str | Path | None) -> bool:
    """Return True if ``name`` selects standard output."""
    return name is None or str(name) == ""


def open_destination(name: str | Path | None) -> TextIO:
    """Return the stream to write rendered records to.

    Args:
        name (str | Path | None): Destination file path; empty or None for STDOUT.

    Returns:
        TextIO: ``sys.stdout``, or a newly opened UTF-8 text file (``newline=""``).

    Raises:
        OSError: If the file cannot be opened (propagated as is).
    """
    if is_stdout_destination(name):
        return sys.stdout
    assert name is not None
    fd: int = os.open(name, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, DESTINATION_FILE_MODE)
    try:
        stream: TextIO = open(fd, "w", encoding="utf-8", newline="")  # noqa: SIM115
    except BaseException:
        os.close(fd)
        raise
    logger.debug("Opened destination file %s", name)
    return stream


@contextmanager
def output_destination(name: str | Path | None) -> Iterator[TextIO]:
    """Open the destination for ``name`` and release it on exit.

    Standard output is yielded as is and left open; a file stream is closed.
    """
    owned: bool = not is_stdout_destination(name)
    stream: TextIO = open_destination(name)
    try:
        yield stream
    finally:
        if owned:
            stream.close()
