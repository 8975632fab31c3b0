# topmark:header:start
#
#   project      : RecordOut
#   file         : tabular.py
#   file_relpath : src/recordout/rendering/tabular.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CSV renderer: a header row followed by one row per record.

Columns come from, in order of precedence:

1. an explicit `FieldDescriptors` sequence passed by the caller;
2. the record type's own `Tabular` implementation;
3. the declared fields of the record type (see `recordout.core.fields.describe_fields`);
4. the keys of the first record, when records are schema-less mappings.

The record type is the one given to the renderer, or else the type of the first
record. Cells are produced by `recordout.core.stringify.stringify`; a field that a
record does not have renders as an empty cell.
"""

from __future__ import annotations

import csv
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from recordout.config.logging import RecordoutLogger, get_logger
from recordout.constants import CSV_DELIMITER, CSV_LINE_TERMINATOR
from recordout.core.fields import (
    FieldDescriptors,
    deref,
    deref_type,
    describe_fields,
    describe_mapping_keys,
    is_tabular_type,
    lookup_field,
)
from recordout.core.stringify import NO_VALUE, stringify

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import TextIO

logger: RecordoutLogger = get_logger(__name__)


class TabularRenderer:
    """Serialize records as comma-separated rows with a header.

    Args:
        record_type (Any | None): The record shape; None to use the type of the
            first record.
        fields (FieldDescriptors | None): Explicit columns; bypasses introspection.

    Attributes:
        record_type (Any | None): The record shape, if known.
        fields (FieldDescriptors | None): Explicit columns, if any.
    """

    def __init__(
        self,
        *,
        record_type: Any | None = None,
        fields: FieldDescriptors | None = None,
    ) -> None:
        self.record_type: Any | None = record_type
        self.fields: FieldDescriptors | None = fields

    def render(self, records: Sequence[Any], *, stream: TextIO) -> None:
        """Write ``records`` to ``stream`` as CSV.

        All rows are built before the first one is written. A row holding a single
        empty cell is written as an empty line. Stream errors propagate
        and may leave a partial document behind.

        Args:
            records (Sequence[Any]): The records to render.
            stream (TextIO): Destination text stream, ideally opened with ``newline=""``.
        """
        content: list[list[str]] = self.build_rows(records)
        writer = csv.writer(stream, delimiter=CSV_DELIMITER, lineterminator=CSV_LINE_TERMINATOR)
        for row in content:
            if row == [""]:
                # csv quotes a lone empty field; a one-column blank cell is a bare line.
                stream.write(CSV_LINE_TERMINATOR)
            else:
                writer.writerow(row)
        logger.debug(
            "TabularRenderer: wrote %d column(s) x %d record(s)", len(content[0]), len(content) - 1
        )

    def build_rows(self, records: Sequence[Any]) -> list[list[str]]:
        """Return the header row followed by one row of cells per record."""
        shape: Any | None = self._shape(records)
        if self.fields is None and is_tabular_type(shape):
            logger.trace("%s supplies its own tabular rows", shape.__name__)
            header: list[str] = list(shape.tabular_headers())
            return [header, *(list(deref(record).tabular_row()) for record in records)]

        descriptors: FieldDescriptors = self.describe(records, shape)
        names: list[str] = descriptors.names()
        return [descriptors.headers(), *(self._row(deref(record), names) for record in records)]

    def describe(self, records: Sequence[Any], shape: Any | None = None) -> FieldDescriptors:
        """Return the columns for ``records``.

        Args:
            records (Sequence[Any]): The records about to be rendered.
            shape (Any | None): The resolved record type, if already known.

        Returns:
            FieldDescriptors: The ordered columns.
        """
        if self.fields is not None:
            return self.fields
        if shape is None:
            shape = self._shape(records)
        descriptors: FieldDescriptors = (
            describe_fields(shape) if shape is not None else FieldDescriptors()
        )
        if not descriptors and records:
            first: object = deref(records[0])
            if isinstance(first, Mapping):
                return describe_mapping_keys(first)
        return descriptors

    def _shape(self, records: Sequence[Any]) -> Any | None:
        if self.record_type is not None:
            return deref_type(self.record_type)
        if records:
            return type(deref(records[0]))
        return None

    @staticmethod
    def _row(record: object, names: list[str]) -> list[str]:
        row: list[str] = []
        for name in names:
            value: object = lookup_field(record, name)
            # A field the record does not have is an empty cell, not an error.
            row.append("" if value is NO_VALUE else stringify(value))
        return row
