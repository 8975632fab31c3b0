# topmark:header:start
#
#   project      : RecordOut
#   file         : base.py
#   file_relpath : src/recordout/rendering/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Renderer protocol shared by the structured and tabular renderers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import TextIO


class RecordRenderer(Protocol):
    """Protocol for renderers used by `recordout.formatter.RecordFormatter`."""

    def render(self, records: Sequence[Any], *, stream: TextIO) -> None:
        """Write ``records`` to ``stream`` as one complete document.

        Args:
            records (Sequence[Any]): The records to render, all of the same shape.
            stream (TextIO): Destination text stream; it is not closed.
        """
        ...
