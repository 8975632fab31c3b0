# topmark:header:start
#
#   project      : RecordOut
#   file         : structured.py
#   file_relpath : src/recordout/rendering/structured.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON renderer: an indented array with one object per record."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from recordout.config.logging import RecordoutLogger, get_logger
from recordout.constants import JSON_INDENT
from recordout.core.normalize import normalize_record

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import TextIO

logger: RecordoutLogger = get_logger(__name__)


class StructuredRenderer:
    """Serialize records as pretty-printed JSON.

    Keys are the declared field identifiers; CSV display names are ignored. The whole
    document is encoded before anything is written, so an encoding error leaves the
    stream untouched.
    """

    def render(self, records: Sequence[Any], *, stream: TextIO) -> None:
        """Write ``records`` to ``stream`` as a JSON array.

        Args:
            records (Sequence[Any]): The records to render.
            stream (TextIO): Destination text stream.

        Raises:
            TypeError: If a value cannot be represented in JSON.
            ValueError: If the records contain a reference cycle or a non-finite float.
        """
        payload: object = normalize_record(list(records))
        text: str = json.dumps(
            payload,
            indent=JSON_INDENT,
            ensure_ascii=False,
            allow_nan=False,
        )
        stream.write(text)
        logger.debug("StructuredRenderer: wrote %d record(s), %d chars", len(records), len(text))
