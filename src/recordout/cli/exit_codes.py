# topmark:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/recordout/cli/exit_codes.py
#   project      : RecordOut
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the RecordOut CLI.

RecordOut follows the BSD `sysexits` convention so that other tooling can interpret
failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the RecordOut CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error). Prefer a more specific
            code if available.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Input records are not valid JSON/NDJSON objects, or records
            cannot be encoded in the requested format. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input or output path does not exist. Mirrors BSD
            ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading input or writing output. Mirrors BSD
            ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions (read/write). Mirrors BSD
            ``EX_NOPERM (77)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
