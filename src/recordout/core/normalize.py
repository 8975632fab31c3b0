# topmark:header:start
#
#   project      : RecordOut
#   file         : normalize.py
#   file_relpath : src/recordout/core/normalize.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Normalize records into JSON-serializable structures.

Conversions:
  - `Ref` -> its target (once per occurrence)
  - dataclass instance -> dict of its fields, in declaration order
  - NamedTuple -> dict of its fields, in declaration order
  - object with callable .to_dict() -> normalize(.to_dict())
  - Enum -> Enum.value
  - datetime / date / time -> ISO-8601 string
  - Path -> str
  - Mapping -> dict[str, normalized value]
  - list/tuple/set/frozenset -> list[normalized item]
  - `Tabular` record -> dict of its own header and row cells
  - class with annotated fields -> dict of those fields (unset ones become null)

Anything else is returned unchanged and left for the JSON encoder to accept or
reject. Field keys are the declared identifiers; CSV display names play no part here.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from datetime import date, datetime, time
from enum import Enum
from pathlib import PurePath
from typing import Any, cast

from recordout.core.fields import (
    FieldDescriptors,
    Ref,
    describe_fields,
    is_tabular_type,
    lookup_field,
)
from recordout.core.stringify import NO_VALUE


def _is_namedtuple(obj: object) -> bool:
    return isinstance(obj, tuple) and hasattr(obj, "_asdict")


def normalize_record(obj: object, _active: set[int] | None = None) -> object:
    """Recursively convert ``obj`` into plain dicts, lists and scalars.

    Args:
        obj (object): A record, a field value, or a sequence of records.
        _active (set[int] | None): Ids of the containers currently being normalized;
            used to detect cycles.

    Returns:
        object: The JSON-serializable representation of ``obj``.

    Raises:
        ValueError: If ``obj`` contains a reference cycle.
    """
    if isinstance(obj, Ref):
        return normalize_record(obj.target, _active)

    if isinstance(obj, Enum):
        return normalize_record(obj.value, _active)

    if isinstance(obj, (datetime, date, time)):
        return obj.isoformat()

    if isinstance(obj, PurePath):
        return str(obj)

    if obj is None or isinstance(obj, (str, int, float)):
        return obj

    active: set[int] = _active if _active is not None else set()
    key: int = id(obj)
    if key in active:
        raise ValueError("Circular reference detected")
    active.add(key)
    try:
        return _normalize_container(obj, active)
    finally:
        active.discard(key)


def _normalize_container(obj: object, active: set[int]) -> object:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            f.name: normalize_record(getattr(obj, f.name), active) for f in dataclasses.fields(obj)
        }

    if _is_namedtuple(obj):
        fields: Mapping[str, Any] = obj._asdict()  # type: ignore[attr-defined]
        return {name: normalize_record(value, active) for name, value in fields.items()}

    to_dict: Any | None = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return normalize_record(to_dict(), active)

    if isinstance(obj, Mapping):
        mapping: Mapping[object, Any] = cast("Mapping[object, Any]", obj)
        return {str(k): normalize_record(v, active) for k, v in mapping.items()}

    if isinstance(obj, (list, tuple, set, frozenset)):
        seq: Iterable[object] = cast("Iterable[object]", obj)
        return [normalize_record(v, active) for v in seq]

    return _normalize_declared(obj, active)


def _normalize_declared(obj: object, active: set[int]) -> object:
    shape: type = type(obj)
    if is_tabular_type(shape):
        headers: list[str] = list(shape.tabular_headers())  # type: ignore[attr-defined]
        return dict(zip(headers, cast("Any", obj).tabular_row(), strict=True))

    descriptors: FieldDescriptors = describe_fields(shape)
    if not descriptors:
        return obj
    values: dict[str, object] = {}
    for name in descriptors.names():
        value: object = lookup_field(obj, name)
        # Declared but never assigned: encode as null.
        values[name] = None if value is NO_VALUE else normalize_record(value, active)
    return values
