"""Type dispatch tables: validator and error message per type tag."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from functools import partial
from types import MappingProxyType
from typing import Any

from bookstore.errors import UnsupportedTypeError
from bookstore.validation import validators
from bookstore.validation.types import FieldType
from bookstore.validation.validators import DEFAULT_PASSWORD_POLICY, PasswordPolicy

Validator = Callable[[Any], bool]
MessageFactory = Callable[[str], str]

ERROR_MESSAGES: Mapping[FieldType, MessageFactory] = MappingProxyType(
    {
        FieldType.EMAIL: lambda field: f"Invalid {field}",
        FieldType.PASSWORD: lambda field: f"Provide a strong {field}",
        FieldType.PURE_NAME: lambda field: f"Enter a valid {field}",
        FieldType.ALPHA_NAME: lambda field: f"Enter a valid alphanumeric {field} field",
        FieldType.PHONE: lambda _: "Enter a valid phone number with country code",
        FieldType.JSON: lambda _: "Provide a valid JSON body",
        FieldType.INTEGER: lambda field: f"Provide a valid Integer value for {field}",
        FieldType.STRING: lambda field: f"Provide a valid string for {field}",
        FieldType.ARRAY: lambda _: "Provide a valid array",
        FieldType.DATETIME: lambda _: "Provide a valid date",
        FieldType.OBJECT: lambda _: "Provide a valid object",
        FieldType.BOOLEAN: lambda _: "Provide a valid boolean value",
        FieldType.NUMBER: lambda _: "Provide a valid number",
    }
)


def build_validators(password_policy: PasswordPolicy = DEFAULT_PASSWORD_POLICY) -> Mapping[FieldType, Validator]:
    return MappingProxyType(
        {
            FieldType.EMAIL: validators.is_email,
            FieldType.PASSWORD: partial(validators.is_strong_password, policy=password_policy),
            FieldType.PURE_NAME: validators.is_pure_name,
            FieldType.ALPHA_NAME: validators.is_alpha_name,
            FieldType.PHONE: validators.is_phone,
            FieldType.JSON: validators.is_json,
            FieldType.INTEGER: validators.is_integer,
            FieldType.STRING: validators.is_string,
            FieldType.ARRAY: validators.is_array,
            FieldType.DATETIME: validators.is_datetime,
            FieldType.OBJECT: validators.is_object,
            FieldType.BOOLEAN: validators.is_boolean,
            FieldType.NUMBER: validators.is_number,
        }
    )


@dataclass(frozen=True, slots=True)
class TypeRules:
    """Read-only pairing of the validator and message tables."""

    validators: Mapping[FieldType, Validator]
    messages: Mapping[FieldType, MessageFactory] = field(default_factory=lambda: ERROR_MESSAGES)

    def validator_for(self, field_type: Any, field: str) -> Validator:
        try:
            return self.validators[field_type]
        except (KeyError, TypeError) as exc:
            raise UnsupportedTypeError(field) from exc

    def message_for(self, field_type: Any, field: str) -> str:
        factory = self.messages.get(field_type)
        if factory is None:
            return f"Invalid {field}"
        return factory(field)


DEFAULT_RULES = TypeRules(validators=build_validators())


def rules_for_policy(password_policy: PasswordPolicy) -> TypeRules:
    if password_policy == DEFAULT_PASSWORD_POLICY:
        return DEFAULT_RULES
    return TypeRules(validators=build_validators(password_policy))
