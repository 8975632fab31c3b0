# topmark:header:start
#
#   project      : RecordOut
#   file         : streams.py
#   file_relpath : tests/streams.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stream doubles for exercising write failures."""

from __future__ import annotations

import io


class FailingStream(io.StringIO):
    """Text stream whose writes start failing after ``ok_writes`` calls."""

    def __init__(self, ok_writes: int) -> None:
        super().__init__(newline="")
        self.ok_writes = ok_writes
        self.error = OSError(28, "No space left on device")

    def write(self, s: str) -> int:
        """Write ``s`` or raise once the budget of successful writes is spent."""
        if self.ok_writes <= 0:
            raise self.error
        self.ok_writes -= 1
        return super().write(s)
