# topmark:header:start
#
#   project      : RecordOut
#   file         : test_formatter.py
#   file_relpath : tests/test_formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RecordFormatter: selector normalization, dispatch and error propagation."""

from __future__ import annotations

import io
import json

import pytest

from recordout import FieldDescriptor, RecordFormatter
from recordout.rendering import StructuredRenderer, TabularRenderer
from tests.records import Money, Person, Plain
from tests.streams import FailingStream

PEOPLE: list[Person] = [Person("Ann", 30), Person("Bo", 4)]


@pytest.mark.parametrize("selector", ["", "   ", None, "xml", "yaml", "tsv"])
def test_empty_or_unknown_format_writes_nothing(buffer: io.StringIO, selector: str | None) -> None:
    """No-op formats succeed without touching the stream."""
    RecordFormatter[Person](buffer, selector).write(PEOPLE)
    assert buffer.getvalue() == ""


def test_no_op_format_ignores_unencodable_records(buffer: io.StringIO) -> None:
    """Records are not even looked at when nothing is to be written."""
    RecordFormatter(buffer, "").write([{"x": object()}])
    assert buffer.getvalue() == ""


@pytest.mark.parametrize("selector", ["json", " JSON ", "Json\t"])
def test_json_selector_variants(buffer: io.StringIO, selector: str) -> None:
    """Selectors are case and whitespace insensitive."""
    RecordFormatter[Person](buffer, selector).write(PEOPLE)
    assert json.loads(buffer.getvalue()) == [
        {"Name": "Ann", "Age": 30},
        {"Name": "Bo", "Age": 4},
    ]


def test_csv_uses_subscripted_record_type(buffer: io.StringIO) -> None:
    """``RecordFormatter[T]`` supplies the shape even for empty input."""
    RecordFormatter[Person](buffer, "CSV").write([])
    assert buffer.getvalue() == "full_name,Age\n"


def test_explicit_record_type_argument(buffer: io.StringIO) -> None:
    """An explicit ``record_type`` works without subscripting."""
    formatter: RecordFormatter[Person] = RecordFormatter(buffer, "csv", record_type=Person)
    formatter.write([])
    assert buffer.getvalue() == "full_name,Age\n"


def test_unsubscripted_formatter_falls_back_to_first_record(buffer: io.StringIO) -> None:
    """Without any type information, the first record decides."""
    RecordFormatter(buffer, "csv").write(PEOPLE)
    assert buffer.getvalue() == "full_name,Age\nAnn,30\nBo,4\n"


def test_key_naming_differs_between_formats() -> None:
    """JSON uses identifiers, CSV uses display names."""
    json_out = io.StringIO()
    csv_out = io.StringIO(newline="")
    RecordFormatter[Person](json_out, "json").write([Person("Ann", 30)])
    RecordFormatter[Person](csv_out, "csv").write([Person("Ann", 30)])
    assert '"Name": "Ann"' in json_out.getvalue()
    assert "full_name" not in json_out.getvalue()
    assert csv_out.getvalue().splitlines()[0] == "full_name,Age"


def test_explicit_fields(buffer: io.StringIO) -> None:
    """Explicit columns accept names and descriptors."""
    RecordFormatter[Person](buffer, "csv", fields=["Age", FieldDescriptor("Name", "who")]).write(
        PEOPLE
    )
    assert buffer.getvalue() == "Age,who\n30,Ann\n4,Bo\n"


def test_iterables_are_accepted(buffer: io.StringIO) -> None:
    """Generators are materialized before rendering."""
    RecordFormatter[Person](buffer, "csv").write(p for p in PEOPLE)
    assert buffer.getvalue().count("\n") == 3


def test_stream_is_left_open(buffer: io.StringIO) -> None:
    """The formatter never closes its stream."""
    RecordFormatter[Person](buffer, "json").write(PEOPLE)
    assert not buffer.closed


def test_renderer_dispatch() -> None:
    """Each format maps to its renderer."""
    formatter = RecordFormatter[Person](io.StringIO(), "json")
    assert formatter.resolved_format is not None
    assert isinstance(formatter.renderer_for(formatter.resolved_format), StructuredRenderer)
    formatter = RecordFormatter[Person](io.StringIO(), "csv")
    assert formatter.resolved_format is not None
    renderer = formatter.renderer_for(formatter.resolved_format)
    assert isinstance(renderer, TabularRenderer)
    assert renderer.record_type is Person


def test_encoding_error_propagates_unwrapped(buffer: io.StringIO) -> None:
    """JSON encoding errors reach the caller as is."""
    with pytest.raises(ValueError, match="JSON compliant"):
        RecordFormatter(buffer, "json").write([{"x": float("inf")}])


def test_stream_error_propagates_unwrapped() -> None:
    """Stream errors reach the caller as the very same exception object."""
    stream = FailingStream(ok_writes=2)
    with pytest.raises(OSError) as exc_info:
        RecordFormatter[Person](stream, "csv").write(PEOPLE)
    assert exc_info.value is stream.error
    assert stream.getvalue() == "full_name,Age\nAnn,30\n"


def test_json_and_csv_accept_the_same_shapes() -> None:
    """Plain annotated classes and ``Tabular`` records render in both formats."""
    for fmt in ("json", "csv"):
        RecordFormatter[Plain](io.StringIO(newline=""), fmt).write([Plain(1, "x")])
        RecordFormatter[Money](io.StringIO(newline=""), fmt).write([Money(1205, "EUR")])
