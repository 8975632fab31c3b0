# topmark:header:start
#
#   project      : RecordOut
#   file         : constants.py
#   file_relpath : src/recordout/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RecordOut Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

RECORDOUT_VERSION: str = get_version("recordout")

# Environment variable consulted for the internal log level.
LOG_LEVEL_ENV_VAR: Final[str] = "RECORDOUT_LOG_LEVEL"

# Field metadata key carrying a CSV display-name override (dataclasses).
CSV_TAG: Final[str] = "csv"

# Text rendered for a value that does not exist at all.
INVALID_VALUE_TEXT: Final[str] = "<invalid Value>"

JSON_INDENT: Final[int] = 2
CSV_DELIMITER: Final[str] = ","
CSV_LINE_TERMINATOR: Final[str] = "\n"

# Permission bits for destination files created by `open_destination()`.
DESTINATION_FILE_MODE: Final[int] = 0o600
