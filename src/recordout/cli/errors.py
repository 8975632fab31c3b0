# topmark:header:start
#
#   project      : RecordOut
#   file         : errors.py
#   file_relpath : src/recordout/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the RecordOut CLI.

Usage:
    The library propagates plain Python errors (``OSError``, ``TypeError``,
    ``ValueError``). Commands translate them into these Click exceptions, which carry
    a standardized message and exit code.
"""

from __future__ import annotations

import click

from recordout.cli.exit_codes import ExitCode


class RecordoutError(click.ClickException):
    """Base class for all RecordOut CLI errors."""

    exit_code = ExitCode.FAILURE


class RecordoutUsageError(RecordoutError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class RecordoutEncodingError(RecordoutError):
    """Error for malformed input records or records that cannot be encoded."""

    exit_code = ExitCode.ENCODING_ERROR


class RecordoutFileNotFoundError(RecordoutError):
    """Error when an input or output path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class RecordoutPermissionDeniedError(RecordoutError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class RecordoutIOError(RecordoutError):
    """Error for I/O errors reading input or writing output."""

    exit_code = ExitCode.IO_ERROR


def error_from_os_error(exc: OSError, *, action: str) -> RecordoutError:
    """Translate an ``OSError`` into the matching CLI error.

    Args:
        exc (OSError): The error raised by the file system or a stream.
        action (str): What was being attempted, e.g. ``"cannot open output"``.

    Returns:
        RecordoutError: The CLI error to raise (``from exc``).
    """
    message: str = f"{action}: {exc}"
    if isinstance(exc, FileNotFoundError):
        return RecordoutFileNotFoundError(message)
    if isinstance(exc, PermissionError):
        return RecordoutPermissionDeniedError(message)
    return RecordoutIOError(message)
