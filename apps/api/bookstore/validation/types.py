"""Validation type tags."""

from enum import Enum


class FieldType(str, Enum):
    EMAIL = "email"
    PASSWORD = "password"
    PURE_NAME = "pure_name"
    ALPHA_NAME = "alpha_name"
    PHONE = "phone"
    JSON = "json"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    DATETIME = "datetime"
    OBJECT = "object"
    BOOLEAN = "boolean"
    CUSTOM = "custom"


CONTAINER_TYPES: frozenset[FieldType] = frozenset({FieldType.ARRAY, FieldType.OBJECT, FieldType.CUSTOM})
