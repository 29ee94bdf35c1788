"""Schema-driven request payload validation."""

from .rules import DEFAULT_RULES, ERROR_MESSAGES, TypeRules, build_validators, rules_for_policy
from .schema import (
    ArrayField,
    CustomField,
    FieldDescriptor,
    ObjectField,
    PrimitiveField,
    Schema,
    descriptor_from_mapping,
    schema_from_mappings,
)
from .transform import transform
from .types import FieldType
from .validators import PasswordPolicy
from .walker import walk

__all__ = [
    "ArrayField",
    "CustomField",
    "DEFAULT_RULES",
    "ERROR_MESSAGES",
    "FieldDescriptor",
    "FieldType",
    "ObjectField",
    "PasswordPolicy",
    "PrimitiveField",
    "Schema",
    "TypeRules",
    "build_validators",
    "descriptor_from_mapping",
    "rules_for_policy",
    "schema_from_mappings",
    "transform",
    "walk",
]
