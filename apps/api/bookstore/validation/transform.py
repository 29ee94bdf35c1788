"""Post-validation value coercion."""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Any

import phonenumbers

from bookstore.validation.types import FieldType
from bookstore.validation.validators import parse_phone


def format_phone(value: str) -> str:
    """Render a phone number as ``+<country code>-<national number>``."""
    number = parse_phone(value)
    if number is None:
        raise ValueError(f"Unparsable phone number: {value!r}")
    return f"+{number.country_code}-{phonenumbers.national_significant_number(number)}"


def to_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    return datetime.fromisoformat(str(value).strip())


def transform(field_type: FieldType, value: Any) -> Any:
    """Convert an already validated value into its typed form.

    Must only run after the validator for ``field_type`` accepted ``value``;
    each coercion here fails only on input its validator rejects.
    """
    if field_type == FieldType.INTEGER:
        return int(str(value))
    if field_type == FieldType.DATETIME:
        return to_datetime(value)
    if field_type == FieldType.PHONE:
        return format_phone(value)
    return value
