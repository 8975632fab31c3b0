# topmark:header:start
#
#   project      : RecordOut
#   file         : __init__.py
#   file_relpath : src/recordout/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RecordOut package.

RecordOut renders a homogeneous list of records as pretty-printed JSON or as CSV and
writes the result to standard output or to a file. It is meant to be called by a
command-line tool once that tool has produced its result records.

Typical usage:

```python
from dataclasses import dataclass

from recordout import RecordFormatter, column, output_destination


@dataclass
class Person:
    Name: str = column("full_name")
    Age: int = 0


with output_destination("people.csv") as stream:
    RecordFormatter[Person](stream, "csv").write([Person("Ann", 30)])
```
"""

from __future__ import annotations

from recordout.core.fields import (
    Column,
    FieldDescriptor,
    FieldDescriptors,
    Ref,
    Tabular,
    column,
    describe_fields,
)
from recordout.core.formats import OutputFormat, resolve_output_format
from recordout.core.stringify import NO_VALUE, stringify
from recordout.destination import open_destination, output_destination
from recordout.formatter import RecordFormatter

__all__ = [
    "NO_VALUE",
    "Column",
    "FieldDescriptor",
    "FieldDescriptors",
    "OutputFormat",
    "RecordFormatter",
    "Ref",
    "Tabular",
    "column",
    "describe_fields",
    "open_destination",
    "output_destination",
    "resolve_output_format",
    "stringify",
]
