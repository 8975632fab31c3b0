# topmark:header:start
#
#   project      : RecordOut
#   file         : test_fields.py
#   file_relpath : tests/core/test_fields.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Field discovery: declared order, display-name overrides, indirection."""

from __future__ import annotations

import dataclasses
from typing import Any, Optional

import pytest

from recordout import FieldDescriptor, Ref, column, describe_fields
from recordout.constants import CSV_TAG
from recordout.core.fields import (
    deref,
    deref_type,
    describe_mapping_keys,
    explicit_fields,
    is_tabular_type,
    lookup_field,
)
from recordout.core.stringify import NO_VALUE
from tests.records import Contact, Employee, Money, Person, Plain, Point, Row


def test_dataclass_fields_in_declaration_order() -> None:
    """Identifiers keep declaration order; metadata overrides feed the headers."""
    fields = describe_fields(Person)
    assert fields.names() == ["Name", "Age"]
    assert fields.headers() == ["full_name", "Age"]


def test_annotated_override_on_dataclass() -> None:
    """``Annotated[..., Column(...)]`` overrides work next to metadata overrides."""
    fields = describe_fields(Contact)
    assert fields.names() == ["Name", "Email", "Phone"]
    assert fields.headers() == ["full_name", "email_address", "Phone"]


def test_inherited_fields_come_first() -> None:
    """Base class fields precede the subclass's own fields."""
    assert describe_fields(Employee).names() == ["Name", "Age", "Team"]


def test_namedtuple_fields() -> None:
    """NamedTuple fields are discovered, with Annotated overrides."""
    fields = describe_fields(Point)
    assert fields.names() == ["x", "y"]
    assert fields.headers() == ["x", "Y"]


def test_typeddict_fields() -> None:
    """TypedDict keys are the fields."""
    assert describe_fields(Row).names() == ["id", "label"]


def test_plain_annotated_class_skips_classvars() -> None:
    """Class variables are not record fields."""
    assert describe_fields(Plain).names() == ["a", "b"]


@pytest.mark.parametrize("record_type", [Ref[Person], Optional[Person], Person | None])
def test_one_level_of_indirection_is_stripped(record_type: Any) -> None:
    """``Ref[T]`` and ``T | None`` describe the fields of ``T``."""
    assert describe_fields(record_type) == describe_fields(Person)


def test_only_one_level_of_indirection_is_stripped() -> None:
    """``Ref[Ref[T]]`` describes ``Ref`` itself."""
    assert describe_fields(Ref[Ref[Person]]).names() == ["target"]


@pytest.mark.parametrize("record_type", [int, str, dict, object, dict[str, Any], list[int]])
def test_types_without_declared_fields(record_type: Any) -> None:
    """Builtins and parametrized generics declare no fields."""
    assert describe_fields(record_type) == ()


def test_header_falls_back_to_name_for_empty_label() -> None:
    """An empty override means no override."""
    assert FieldDescriptor("Name", "").header == "Name"
    assert FieldDescriptor("Name").header == "Name"
    assert FieldDescriptor("Name", "n").header == "n"


def test_column_keeps_extra_metadata_and_field_options() -> None:
    """``column()`` forwards to ``dataclasses.field``."""
    f = column("label", default=3, metadata={"unit": "cm"})
    assert f.metadata == {"unit": "cm", CSV_TAG: "label"}
    assert f.default == 3


def test_explicit_fields_accept_names_and_descriptors() -> None:
    """Plain strings become descriptors without override."""
    fields = explicit_fields(["a", FieldDescriptor("b", "B")])
    assert fields.names() == ["a", "b"]
    assert fields.headers() == ["a", "B"]


def test_mapping_keys_in_insertion_order() -> None:
    """Schema-less mappings are described by their keys."""
    assert describe_mapping_keys({"z": 1, "a": 2}).names() == ["z", "a"]


def test_lookup_field_on_objects_and_mappings() -> None:
    """Attributes and keys are looked up; absent ones yield NO_VALUE."""
    person = Person("Ann", 30)
    assert lookup_field(person, "Age") == 30
    assert lookup_field(person, "Email") is NO_VALUE
    assert lookup_field({"Age": 4}, "Age") == 4
    assert lookup_field({"Age": 4}, "Name") is NO_VALUE
    assert lookup_field({"Age": None}, "Age") is None


def test_deref_unwraps_once() -> None:
    """Records are dereferenced exactly one level."""
    person = Person("Ann", 30)
    assert deref(Ref(person)) is person
    assert deref(person) is person
    inner = Ref(person)
    assert deref(Ref(inner)) is inner


def test_deref_type_leaves_wider_unions_alone() -> None:
    """Only ``T | None`` counts as indirection."""
    assert deref_type(int | str | None) == int | str | None
    assert deref_type(Person) is Person


def test_tabular_type_detection() -> None:
    """Types implementing ``tabular_headers`` are tabular; dataclasses are not."""
    assert is_tabular_type(Money)
    assert not is_tabular_type(Person)
    assert not is_tabular_type(None)


def test_dataclass_field_without_metadata_has_no_label() -> None:
    """Fields declared without override carry ``label=None``."""
    age = describe_fields(Person)[1]
    assert age == FieldDescriptor("Age", None)
    assert not dataclasses.fields(Person)[1].metadata
