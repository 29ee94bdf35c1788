"""Schema descriptor and walker tests."""

from __future__ import annotations

import unittest

from bookstore.errors import (
    ApiError,
    CustomValidationError,
    MissingRequiredFieldError,
    SchemaDefinitionError,
    TypeValidationError,
    UnsupportedTypeError,
)
from bookstore.routes.request_schemas import UPDATE_PURCHASE_STATUS
from bookstore.validation import (
    ArrayField,
    CustomField,
    FieldType,
    ObjectField,
    PasswordPolicy,
    PrimitiveField,
    TypeRules,
    descriptor_from_mapping,
    rules_for_policy,
    walk,
)

LOGIN = (
    PrimitiveField(field="email", type=FieldType.EMAIL),
    PrimitiveField(field="password", type=FieldType.PASSWORD),
)

ADDRESS = (
    PrimitiveField(field="street", type=FieldType.STRING),
    PrimitiveField(field="city", type=FieldType.STRING),
)


class WalkerOrderingTests(unittest.TestCase):
    def test_first_failing_field_in_schema_order_wins(self) -> None:
        with self.assertRaises(TypeValidationError) as ctx:
            walk(LOGIN, {"email": "bad", "password": "weak"})
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(ctx.exception.message, "Invalid email")

        with self.assertRaises(TypeValidationError) as ctx:
            walk(LOGIN, {"email": "reader@bookstore.io", "password": "weak"})
        self.assertEqual(ctx.exception.message, "Provide a strong password")

    def test_missing_and_null_required_fields(self) -> None:
        for payload in ({}, {"email": None, "password": "Str0ng!pass"}):
            with self.subTest(payload=payload):
                with self.assertRaises(MissingRequiredFieldError) as ctx:
                    walk(LOGIN, payload)
                self.assertEqual(ctx.exception.message, "email is required")
                self.assertEqual(ctx.exception.field, "email")

    def test_optional_absent_field_is_skipped(self) -> None:
        schema = (PrimitiveField(field="age", type=FieldType.INTEGER, required=False),)
        self.assertEqual(walk(schema, {}), {})
        self.assertEqual(walk(schema, {"age": None}), {"age": None})

    def test_input_is_not_mutated_and_unknown_keys_survive(self) -> None:
        schema = (PrimitiveField(field="age", type=FieldType.INTEGER),)
        payload = {"age": "42", "nickname": "ada"}

        result = walk(schema, payload)

        self.assertEqual(result, {"age": 42, "nickname": "ada"})
        self.assertEqual(payload["age"], "42")
        self.assertIsNot(result, payload)

    def test_phone_and_datetime_values_are_transformed(self) -> None:
        schema = (
            PrimitiveField(field="phone", type=FieldType.PHONE),
            PrimitiveField(field="born", type=FieldType.DATETIME),
        )
        result = walk(schema, {"phone": "+44 20 8366 1177", "born": "1815-12-10"})
        self.assertEqual(result["phone"], "+44-2083661177")
        self.assertEqual(result["born"].year, 1815)


class WalkerContainerTests(unittest.TestCase):
    def test_array_of_objects_reports_nested_missing_field(self) -> None:
        schema = (ArrayField(field="addresses", items=FieldType.OBJECT, schema=ADDRESS),)
        with self.assertRaises(MissingRequiredFieldError) as ctx:
            walk(schema, {"addresses": [{"street": "1 Main St", "city": "Leeds"}, {"street": "x"}]})
        self.assertEqual(ctx.exception.message, "city is required")

    def test_array_of_objects_rejects_non_object_elements(self) -> None:
        schema = (ArrayField(field="addresses", items=FieldType.OBJECT, schema=ADDRESS),)
        with self.assertRaises(TypeValidationError) as ctx:
            walk(schema, {"addresses": ["1 Main St"]})
        self.assertEqual(ctx.exception.message, "Provide a valid object")

    def test_array_of_primitives_uses_element_message_with_array_name(self) -> None:
        schema = (ArrayField(field="scores", items=FieldType.INTEGER),)
        with self.assertRaises(TypeValidationError) as ctx:
            walk(schema, {"scores": ["1", "x"]})
        self.assertEqual(ctx.exception.message, "Provide a valid Integer value for scores")

        self.assertEqual(walk(schema, {"scores": ["1", 2]})["scores"], [1, 2])

    def test_array_and_object_shape_checks(self) -> None:
        schema = (
            ArrayField(field="tags"),
            ObjectField(field="address", schema=ADDRESS),
        )
        with self.assertRaises(TypeValidationError) as ctx:
            walk(schema, {"tags": "fiction", "address": {}})
        self.assertEqual(ctx.exception.message, "Provide a valid array")

        with self.assertRaises(TypeValidationError) as ctx:
            walk(schema, {"tags": [], "address": "Leeds"})
        self.assertEqual(ctx.exception.message, "Provide a valid object")

        with self.assertRaises(MissingRequiredFieldError) as ctx:
            walk(schema, {"tags": [], "address": {"street": "1 Main St"}})
        self.assertEqual(ctx.exception.message, "city is required")

    def test_shape_only_array_copies_elements_untouched(self) -> None:
        schema = (ArrayField(field="tags"),)
        self.assertEqual(walk(schema, {"tags": ["a", 1, None]})["tags"], ["a", 1, None])


class WalkerCustomTests(unittest.TestCase):
    def test_custom_status_format_raises_its_own_error(self) -> None:
        with self.assertRaises(ApiError) as ctx:
            walk(UPDATE_PURCHASE_STATUS, {"status": "SHIPPED"})
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(ctx.exception.message, "Invalid status")

        self.assertEqual(walk(UPDATE_PURCHASE_STATUS, {"status": "COMPLETED"}), {"status": "COMPLETED"})

    def test_falsy_custom_format_uses_default_or_supplied_message(self) -> None:
        default = (CustomField(field="code", format=lambda value: value == "ok"),)
        with self.assertRaises(CustomValidationError) as ctx:
            walk(default, {"code": "nope"})
        self.assertEqual(ctx.exception.message, "Invalid code")

        supplied = (CustomField(field="code", format=lambda value: value == "ok", message="Bad code"),)
        with self.assertRaises(CustomValidationError) as ctx:
            walk(supplied, {"code": "nope"})
        self.assertEqual(ctx.exception.message, "Bad code")

    def test_custom_format_raising_plain_exception_counts_as_failure(self) -> None:
        schema = (CustomField(field="quantity", format=lambda value: int(value) > 0),)
        with self.assertRaises(CustomValidationError) as ctx:
            walk(schema, {"quantity": "many"})
        self.assertEqual(ctx.exception.message, "Invalid quantity")

    def test_validate_hook_runs_on_transformed_value(self) -> None:
        schema = (
            PrimitiveField(
                field="age",
                type=FieldType.INTEGER,
                validate=lambda value: value >= 18,
                message="Must be an adult",
            ),
        )
        with self.assertRaises(CustomValidationError) as ctx:
            walk(schema, {"age": "12"})
        self.assertEqual(ctx.exception.message, "Must be an adult")
        self.assertEqual(walk(schema, {"age": "20"}), {"age": 20})


class SchemaDefinitionTests(unittest.TestCase):
    def test_descriptor_invariants_fail_at_construction(self) -> None:
        with self.assertRaises(SchemaDefinitionError):
            PrimitiveField(field="", type=FieldType.STRING)
        with self.assertRaises(SchemaDefinitionError):
            PrimitiveField(field="tags", type=FieldType.ARRAY)
        with self.assertRaises(SchemaDefinitionError):
            ArrayField(field="addresses", items=FieldType.OBJECT)
        with self.assertRaises(SchemaDefinitionError):
            CustomField(field="status")

    def test_mapping_form_builds_matching_variants(self) -> None:
        tags = descriptor_from_mapping({"field": "tags", "type": "array", "arrayType": "string", "required": True})
        self.assertIsInstance(tags, ArrayField)
        self.assertEqual(tags.items, FieldType.STRING)
        self.assertTrue(tags.required)

        address = descriptor_from_mapping(
            {
                "field": "address",
                "type": "object",
                "schema": [{"field": "city", "type": "string", "required": True}],
            }
        )
        self.assertIsInstance(address, ObjectField)
        self.assertFalse(address.required)
        self.assertEqual(address.schema[0].field, "city")

    def test_unknown_tag_in_mapping_form_is_unsupported(self) -> None:
        with self.assertRaises(UnsupportedTypeError) as ctx:
            descriptor_from_mapping({"field": "token", "type": "uuid"})
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(ctx.exception.message, "Unsupported validation type for token")

    def test_tag_missing_from_dispatch_table_is_unsupported(self) -> None:
        rules = TypeRules(validators={})
        with self.assertRaises(UnsupportedTypeError):
            walk((PrimitiveField(field="name", type=FieldType.STRING),), {"name": "x"}, rules)

    def test_password_rules_follow_policy(self) -> None:
        rules = rules_for_policy(PasswordPolicy(min_length=12))
        with self.assertRaises(TypeValidationError):
            walk(LOGIN, {"email": "reader@bookstore.io", "password": "Str0ng!pass"}, rules)
        walk(LOGIN, {"email": "reader@bookstore.io", "password": "Str0ng!pass"})


if __name__ == "__main__":
    unittest.main()
