"""Schema walker: validates a payload against a schema and returns typed values."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from bookstore.errors import (
    ApiError,
    CustomValidationError,
    MissingRequiredFieldError,
    TypeValidationError,
)
from bookstore.validation.rules import DEFAULT_RULES, TypeRules
from bookstore.validation.schema import (
    ArrayField,
    CustomField,
    FieldDescriptor,
    ObjectField,
    PrimitiveField,
    Schema,
)
from bookstore.validation.transform import transform
from bookstore.validation.types import FieldType

logger = logging.getLogger(__name__)


def walk(schema: Schema, payload: Mapping[str, Any], rules: TypeRules = DEFAULT_RULES) -> dict[str, Any]:
    """Validate ``payload`` against ``schema`` in order and return a typed copy.

    Raises the first ``FieldValidationError`` encountered. Keys not named by the
    schema are carried over unchanged; the input mapping is never mutated.
    """
    result = dict(payload)
    for descriptor in schema:
        value = result.get(descriptor.field)
        if value is None:
            if descriptor.required:
                raise MissingRequiredFieldError(descriptor.field)
            continue
        result[descriptor.field] = _walk_field(descriptor, value, rules)
    return result


def _walk_field(descriptor: FieldDescriptor, value: Any, rules: TypeRules) -> Any:
    if isinstance(descriptor, CustomField):
        _check_custom(descriptor, value)
        typed = value
    elif isinstance(descriptor, ArrayField):
        typed = _walk_array(descriptor, value, rules)
    elif isinstance(descriptor, ObjectField):
        typed = _walk_object(descriptor, value, rules)
    elif isinstance(descriptor, PrimitiveField):
        typed = _walk_primitive(descriptor.field, descriptor.type, value, rules, descriptor.message)
    else:
        raise TypeError(f"Unknown field descriptor {descriptor!r}")

    if descriptor.validate is not None and not descriptor.validate(typed):
        raise CustomValidationError(descriptor.field, descriptor.message or f"Invalid {descriptor.field}")
    return typed


def _check_custom(descriptor: CustomField, value: Any) -> None:
    try:
        accepted = descriptor.format(value)
    except ApiError:
        raise
    except Exception as exc:
        logger.debug("validation.format_raised field=%s error=%s", descriptor.field, type(exc).__name__)
        accepted = False
    if not accepted and descriptor.required:
        raise CustomValidationError(descriptor.field, descriptor.message or f"Invalid {descriptor.field}")


def _walk_primitive(field: str, field_type: Any, value: Any, rules: TypeRules, message: str | None) -> Any:
    validator = rules.validator_for(field_type, field)
    if not validator(value):
        raise TypeValidationError(field, message or rules.message_for(field_type, field))
    return transform(field_type, value)


def _walk_array(descriptor: ArrayField, value: Any, rules: TypeRules) -> list[Any]:
    if not isinstance(value, list):
        raise TypeValidationError(descriptor.field, descriptor.message or rules.message_for(FieldType.ARRAY, descriptor.field))

    if descriptor.items is None:
        return list(value)

    if descriptor.items == FieldType.OBJECT:
        return [_walk_nested(descriptor, element, rules) for element in value]

    typed: list[Any] = []
    for element in value:
        if element is None:
            if descriptor.required:
                raise MissingRequiredFieldError(descriptor.field)
            typed.append(element)
            continue
        typed.append(_walk_primitive(descriptor.field, descriptor.items, element, rules, descriptor.message))
    return typed


def _walk_object(descriptor: ObjectField, value: Any, rules: TypeRules) -> dict[str, Any]:
    return _walk_nested(descriptor, value, rules)


def _walk_nested(descriptor: ArrayField | ObjectField, value: Any, rules: TypeRules) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise TypeValidationError(descriptor.field, descriptor.message or rules.message_for(FieldType.OBJECT, descriptor.field))
    if not descriptor.schema:
        return dict(value)
    return walk(descriptor.schema, value, rules)


__all__ = ["walk"]
