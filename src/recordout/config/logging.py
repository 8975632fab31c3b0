# topmark:header:start
#
#   project      : RecordOut
#   file         : logging.py
#   file_relpath : src/recordout/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom RecordOut logging with TRACE logging.

This module extends the standard logging module with a custom TRACE level, a
specialized logger class, and colored output formatting. Log records are written to
STDERR: STDOUT is reserved for rendered records.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from recordout.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from typing import TextIO

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class RecordoutLogger(logging.Logger):
    """Custom logger class for RecordOut with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(RecordoutLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


# Lowest level first; a record takes the style of the highest threshold it reaches.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (TRACE_LEVEL, chalk.blue),
    (logging.DEBUG, chalk.gray),
    (logging.INFO, chalk.green),
    (logging.WARNING, chalk.yellow),
    (logging.ERROR, chalk.red),
    (logging.CRITICAL, chalk.red_bright),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record by severity.

    Records below TRACE (custom levels) are dimmed red.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and apply the style of its level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized log line.
        """
        message: str = super().format(record)
        style: Callable[[str], str] = chalk.dim.red
        for threshold, candidate in _LEVEL_STYLES:
            if record.levelno >= threshold:
                style = candidate
        return style(message)


def parse_log_level(value: str) -> int | None:
    """Return the logging level named by ``value``, or None if it is not recognized.

    Accepts level names (case-insensitive, including ``TRACE``) and numeric strings.
    """
    v = value.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Return a logging level from environment or None if unset.

    Honors RECORDOUT_LOG_LEVEL (e.g., "TRACE", "DEBUG", "INFO", numeric "10").
    """
    val = os.environ.get(LOG_LEVEL_ENV_VAR)
    if val:
        return parse_log_level(val)
    return None


def setup_logging(level: int | None = None, *, stream: TextIO | None = None) -> None:
    """Route all RecordOut log records to one colored handler on the root logger.

    Any handler installed by an earlier call is replaced, so the CLI can rebind
    logging per invocation.

    Args:
        level (int | None): Threshold; None consults ``RECORDOUT_LOG_LEVEL`` and falls
            back to CRITICAL, which keeps the library silent.
        stream (TextIO | None): Where log lines go; STDERR (looked up at call time)
            when None.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    fmt: str = LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT
    handler.setFormatter(ChalkFormatter(fmt))
    root_logger.addHandler(handler)
    root_logger.propagate = False


def get_logger(name: str) -> RecordoutLogger:
    """Return the `RecordoutLogger` named ``name`` (usually ``__name__``)."""
    return cast("RecordoutLogger", logging.getLogger(name))
