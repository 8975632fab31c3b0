# topmark:header:start
#
#   project      : RecordOut
#   file         : formatter.py
#   file_relpath : src/recordout/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render a homogeneous list of records in a selected output format.

`RecordFormatter` is bound to a text stream and a free-form format selector. Its
`write` method normalizes the selector, picks the matching renderer and lets it write
to the stream:

- ``"json"``: `recordout.rendering.structured.StructuredRenderer`
- ``"csv"``: `recordout.rendering.tabular.TabularRenderer`
- ``""`` or anything else: nothing is written and no error is raised

Errors raised while encoding or writing are not caught, wrapped or logged here; the
caller decides how to report them.

The record type drives CSV columns. It is taken from the ``record_type`` argument,
else from the subscripted class (``RecordFormatter[Person](...)``), else from the
first record.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Generic, TypeVar, get_args

from recordout.config.logging import RecordoutLogger, get_logger
from recordout.core.fields import FieldDescriptor, FieldDescriptors, explicit_fields
from recordout.core.formats import OutputFormat, resolve_output_format
from recordout.rendering.structured import StructuredRenderer
from recordout.rendering.tabular import TabularRenderer

if TYPE_CHECKING:
    from typing import TextIO

    from recordout.rendering.base import RecordRenderer

logger: RecordoutLogger = get_logger(__name__)

T = TypeVar("T")


class RecordFormatter(Generic[T]):
    """Write records of type ``T`` to a stream as JSON or CSV.

    Args:
        stream (TextIO): Destination stream. The formatter never closes it.
        output_format (str | None): Format selector; case-insensitive, surrounding
            whitespace ignored.
        record_type (Any | None): The record shape, when it is not given by
            subscripting the class.
        fields (Iterable[FieldDescriptor | str] | None): Explicit CSV columns in
            order; bypasses field discovery.

    Attributes:
        stream (TextIO): Destination stream.
        output_format (str): The selector as given (None becomes ``""``).
        record_type (Any | None): Explicit record shape, if any.
        fields (FieldDescriptors | None): Explicit CSV columns, if any.
    """

    def __init__(
        self,
        stream: TextIO,
        output_format: str | None,
        *,
        record_type: Any | None = None,
        fields: Iterable[FieldDescriptor | str] | None = None,
    ) -> None:
        self.stream: TextIO = stream
        self.output_format: str = output_format or ""
        self.record_type: Any | None = record_type
        self.fields: FieldDescriptors | None = (
            explicit_fields(fields) if fields is not None else None
        )

    @property
    def resolved_format(self) -> OutputFormat | None:
        """The selected format, or None when nothing is to be written."""
        return resolve_output_format(self.output_format)

    def resolve_record_type(self) -> Any | None:
        """Return the record shape from the constructor or the subscripted class."""
        if self.record_type is not None:
            return self.record_type
        # typing sets __orig_class__ on instances created through RecordFormatter[X](...)
        orig: Any | None = getattr(self, "__orig_class__", None)
        if orig is not None:
            args: tuple[Any, ...] = get_args(orig)
            if args and not isinstance(args[0], TypeVar):
                return args[0]
        return None

    def renderer_for(self, fmt: OutputFormat) -> RecordRenderer:
        """Return the renderer writing ``fmt``."""
        if fmt is OutputFormat.JSON:
            return StructuredRenderer()
        return TabularRenderer(record_type=self.resolve_record_type(), fields=self.fields)

    def write(self, records: Iterable[T]) -> None:
        """Render ``records`` to the bound stream in the selected format.

        Args:
            records (Iterable[T]): The records to render; may be empty. They are
                materialized into a list before rendering.

        Raises:
            OSError: If writing to the stream fails (propagated as is).
            TypeError: If a record cannot be encoded as JSON (propagated as is).
            ValueError: If a record contains a cycle or a non-finite float in JSON mode
                (propagated as is).
        """
        fmt: OutputFormat | None = self.resolved_format
        if fmt is None:
            logger.trace("No output format selected (%r): nothing to write", self.output_format)
            return
        items: list[T] = list(records)
        logger.trace("Rendering %d record(s) as %s", len(items), fmt.value)
        self.renderer_for(fmt).render(items, stream=self.stream)
