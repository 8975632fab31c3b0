# topmark:header:start
#
#   project      : RecordOut
#   file         : fields.py
#   file_relpath : src/recordout/core/fields.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Field discovery for record shapes.

A record shape is any class that declares its fields: dataclasses, NamedTuples,
TypedDicts and plain classes with annotated attributes. `describe_fields` turns such a
class into an ordered `FieldDescriptors` sequence, pairing each declared field name
with an optional display-name override. Overrides are declared either through dataclass
field metadata (see `column`) or with a `Column` marker in ``typing.Annotated``:

```python
@dataclass
class Person:
    Name: str = column("full_name")
    Age: Annotated[int, Column("age_years")] = 0
```

One level of indirection is supported on both sides: a record type spelled ``Ref[T]``
or ``T | None`` describes the fields of ``T``, and a record wrapped in `Ref` is
unwrapped once before its fields are read.

Types that know better can implement the `Tabular` protocol and supply their own
header and row cells; introspection is skipped for them.
"""

from __future__ import annotations

import dataclasses
import inspect
import types
from collections.abc import Iterable, Mapping, Sequence
from typing import (
    Annotated,
    Any,
    ClassVar,
    Generic,
    Protocol,
    TypeVar,
    Union,
    get_args,
    get_origin,
    get_type_hints,
    runtime_checkable,
)

from recordout.config.logging import RecordoutLogger, get_logger
from recordout.constants import CSV_TAG
from recordout.core.stringify import NO_VALUE

logger: RecordoutLogger = get_logger(__name__)

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class FieldDescriptor:
    """A declared record field and its optional display-name override.

    Attributes:
        name (str): Field identifier as declared on the record type.
        label (str | None): Display name used as CSV header; None (or empty) means
            ``name`` is used verbatim.
    """

    name: str
    label: str | None = None

    @property
    def header(self) -> str:
        """Return the CSV header cell for this field."""
        return self.label or self.name


class FieldDescriptors(tuple[FieldDescriptor, ...]):
    """Ordered field descriptors; header and lookup order are the same by construction."""

    __slots__ = ()

    def headers(self) -> list[str]:
        """Return the header labels, one per descriptor."""
        return [fd.header for fd in self]

    def names(self) -> list[str]:
        """Return the field identifiers, one per descriptor."""
        return [fd.name for fd in self]


@dataclasses.dataclass(frozen=True)
class Column:
    """``typing.Annotated`` marker carrying a CSV display name.

    Example:
        ``Name: Annotated[str, Column("full_name")]``
    """

    name: str


@dataclasses.dataclass(frozen=True)
class Ref(Generic[T]):
    """A single level of indirection around a record."""

    target: T


@runtime_checkable
class Tabular(Protocol):
    """Records that supply their own tabular representation."""

    @classmethod
    def tabular_headers(cls) -> Sequence[str]:
        """Return the header cells for this record type."""
        ...

    def tabular_row(self) -> Sequence[str]:
        """Return the row cells for this record, aligned with `tabular_headers`."""
        ...


def column(label: str, **kwargs: Any) -> Any:
    """Declare a dataclass field with a CSV display-name override.

    Keyword arguments are forwarded to `dataclasses.field`; any ``metadata`` passed
    is kept alongside the override.

    Args:
        label (str): CSV header label for the field.
        **kwargs (Any): Forwarded to `dataclasses.field` (``default``, ``repr``...).

    Returns:
        Any: The `dataclasses.Field` to assign in the class body.
    """
    metadata: dict[str, Any] = dict(kwargs.pop("metadata", None) or {})
    metadata[CSV_TAG] = label
    return dataclasses.field(metadata=metadata, **kwargs)


def deref_type(record_type: Any) -> Any:
    """Strip one level of indirection (``Ref[T]`` or ``T | None``) from a record type."""
    origin = get_origin(record_type)
    if origin is Ref:
        args = get_args(record_type)
        return args[0] if args else object
    if origin is Union or origin is types.UnionType:
        members = [a for a in get_args(record_type) if a is not type(None)]
        if len(members) == 1:
            return members[0]
    return record_type


def deref(record: object) -> object:
    """Unwrap a `Ref` once; other records are returned unchanged."""
    if isinstance(record, Ref):
        return record.target
    return record


def is_tabular_type(shape: Any) -> bool:
    """Return True if ``shape`` supplies its own header and row cells."""
    return isinstance(shape, type) and callable(getattr(shape, "tabular_headers", None))


def _is_namedtuple(shape: type) -> bool:
    return issubclass(shape, tuple) and hasattr(shape, "_fields")


def _type_hints(shape: type) -> dict[str, Any]:
    try:
        return get_type_hints(shape, include_extras=True)
    except (NameError, TypeError) as exc:
        # Forward references that cannot be resolved: fall back to the raw annotations.
        logger.debug("Cannot resolve annotations of %s (%s); using raw annotations", shape, exc)
        merged: dict[str, Any] = {}
        for base in reversed(shape.__mro__):
            merged.update(inspect.get_annotations(base))
        return merged


def _annotated_label(hint: Any) -> str | None:
    if get_origin(hint) is Annotated:
        for meta in hint.__metadata__:
            if isinstance(meta, Column):
                return meta.name
    return None


def _is_classvar(hint: Any) -> bool:
    if get_origin(hint) is Annotated:
        hint = get_args(hint)[0]
    return hint is ClassVar or get_origin(hint) is ClassVar


def describe_fields(record_type: Any) -> FieldDescriptors:
    """Describe the declared fields of a record type, in declaration order.

    Args:
        record_type (Any): The record shape, optionally spelled ``Ref[T]`` or
            ``T | None``.

    Returns:
        FieldDescriptors: One descriptor per declared field. Types that do not declare
        fields (``object``, ``dict``, builtins) yield an empty sequence.
    """
    shape = deref_type(record_type)
    origin = get_origin(shape)
    if isinstance(origin, type):
        # Parametrized generics (``Ref[T]``, ``dict[str, int]``) describe their class.
        shape = origin
    if not isinstance(shape, type):
        logger.debug("Record type %r is not a class: no fields", shape)
        return FieldDescriptors()

    hints: dict[str, Any] = _type_hints(shape)
    declared: list[tuple[str, str | None]]
    if dataclasses.is_dataclass(shape):
        declared = [(f.name, f.metadata.get(CSV_TAG)) for f in dataclasses.fields(shape)]
    elif _is_namedtuple(shape):
        declared = [(name, None) for name in shape._fields]  # type: ignore[attr-defined]
    else:
        declared = [(name, None) for name, hint in hints.items() if not _is_classvar(hint)]

    descriptors = FieldDescriptors(
        FieldDescriptor(name=name, label=label or _annotated_label(hints.get(name)))
        for name, label in declared
    )
    logger.trace("Fields of %s: %s", shape.__name__, descriptors.names())
    return descriptors


def describe_mapping_keys(record: Mapping[str, Any]) -> FieldDescriptors:
    """Describe a schema-less mapping record by its keys, in insertion order."""
    return FieldDescriptors(FieldDescriptor(name=str(key)) for key in record)


def explicit_fields(columns: Iterable[FieldDescriptor | str]) -> FieldDescriptors:
    """Build descriptors from a caller-supplied column list.

    Plain strings are taken as field identifiers without an override.
    """
    return FieldDescriptors(
        col if isinstance(col, FieldDescriptor) else FieldDescriptor(name=col) for col in columns
    )


def lookup_field(record: object, name: str) -> object:
    """Return the value of field ``name`` on ``record``, or `NO_VALUE` if it has none.

    Mappings are looked up by key, any other record by attribute.
    """
    if isinstance(record, Mapping):
        return record[name] if name in record else NO_VALUE
    return getattr(record, name, NO_VALUE)
