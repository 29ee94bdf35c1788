"""Declarative field descriptors.

A validation schema is an ordered tuple of descriptors. Each descriptor is one
of four frozen variants so that nested shapes are explicit:

``PrimitiveField``
    a scalar tag such as EMAIL or INTEGER
``ArrayField``
    a list, optionally of a scalar tag or of objects with a nested schema
``ObjectField``
    a mapping, optionally with a nested schema
``CustomField``
    a value checked by a caller supplied ``format`` predicate

Invariants are checked when a descriptor is built, so a broken schema fails at
import time rather than on the first request.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

from bookstore.errors import SchemaDefinitionError, UnsupportedTypeError
from bookstore.validation.types import CONTAINER_TYPES, FieldType

Predicate = Callable[[Any], Any]


@dataclass(frozen=True, slots=True, kw_only=True)
class _Descriptor:
    field: str
    required: bool = True
    validate: Predicate | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.field, str) or not self.field:
            raise SchemaDefinitionError("Field descriptor requires a non-empty field name")


@dataclass(frozen=True, slots=True, kw_only=True)
class PrimitiveField(_Descriptor):
    type: FieldType

    def __post_init__(self) -> None:
        super(PrimitiveField, self).__post_init__()
        if self.type in CONTAINER_TYPES:
            raise SchemaDefinitionError(f"{self.field}: use ArrayField, ObjectField or CustomField for {self.type.value}")


@dataclass(frozen=True, slots=True, kw_only=True)
class ArrayField(_Descriptor):
    items: FieldType | None = None
    schema: tuple[FieldDescriptor, ...] | None = None

    @property
    def type(self) -> FieldType:
        return FieldType.ARRAY

    def __post_init__(self) -> None:
        super(ArrayField, self).__post_init__()
        if self.items is FieldType.OBJECT and not self.schema:
            raise SchemaDefinitionError(f"{self.field}: an array of objects needs a nested schema")
        if self.items in (FieldType.ARRAY, FieldType.CUSTOM):
            raise SchemaDefinitionError(f"{self.field}: unsupported array item type {self.items.value}")


@dataclass(frozen=True, slots=True, kw_only=True)
class ObjectField(_Descriptor):
    schema: tuple[FieldDescriptor, ...] | None = None

    @property
    def type(self) -> FieldType:
        return FieldType.OBJECT


@dataclass(frozen=True, slots=True, kw_only=True)
class CustomField(_Descriptor):
    format: Predicate | None = None

    @property
    def type(self) -> FieldType:
        return FieldType.CUSTOM

    def __post_init__(self) -> None:
        super(CustomField, self).__post_init__()
        if self.format is None:
            raise SchemaDefinitionError(f"{self.field}: a custom field needs a format predicate")


FieldDescriptor = Union[PrimitiveField, ArrayField, ObjectField, CustomField]
Schema = Sequence[FieldDescriptor]


def _coerce_type(raw: Any, field: str) -> FieldType:
    if isinstance(raw, FieldType):
        return raw
    try:
        return FieldType(raw)
    except ValueError as exc:
        raise UnsupportedTypeError(field) from exc


def descriptor_from_mapping(spec: Mapping[str, Any]) -> FieldDescriptor:
    """Build a descriptor from a loosely typed mapping.

    Accepts the ``{"field", "type", "required", "arrayType", "schema", ...}``
    shape used by schemas kept in configuration files.
    """
    field = spec.get("field") or ""
    field_type = _coerce_type(spec.get("type"), field)
    common = {
        "field": field,
        "required": bool(spec.get("required", False)),
        "validate": spec.get("validate"),
        "message": spec.get("message"),
    }
    nested = spec.get("schema")
    nested_schema = schema_from_mappings(nested) if nested else None

    if field_type is FieldType.ARRAY:
        raw_items = spec.get("arrayType")
        items = _coerce_type(raw_items, field) if raw_items is not None else None
        return ArrayField(items=items, schema=nested_schema, **common)
    if field_type is FieldType.OBJECT:
        return ObjectField(schema=nested_schema, **common)
    if field_type is FieldType.CUSTOM:
        return CustomField(format=spec.get("format"), **common)
    return PrimitiveField(type=field_type, **common)


def schema_from_mappings(specs: Iterable[Mapping[str, Any]]) -> tuple[FieldDescriptor, ...]:
    return tuple(descriptor_from_mapping(spec) for spec in specs)


__all__ = [
    "ArrayField",
    "CustomField",
    "FieldDescriptor",
    "ObjectField",
    "PrimitiveField",
    "Schema",
    "descriptor_from_mapping",
    "schema_from_mappings",
]
