"""Request validation dependency tests."""

import os
from datetime import UTC, datetime
from typing import Annotated
import unittest

from fastapi import Depends, Request
from fastapi.testclient import TestClient

from bookstore.core.config import get_settings
from bookstore.main import create_app
from bookstore.routes.dependencies import get_auth_service
from bookstore.routes.validation import ValidatedPayload, validated_body
from bookstore.schemas.auth import User, UserType
from bookstore.validation import FieldType, PrimitiveField


class _CapturingAuthService:
    def __init__(self) -> None:
        self.registered: list[dict] = []

    def register(self, *, email: str, password: str, full_name: str, user_type_id: int) -> User:
        self.registered.append(
            {"email": email, "password": password, "full_name": full_name, "user_type_id": user_type_id}
        )
        return User(
            id="user-1",
            email=email,
            full_name=full_name,
            user_type=UserType(id=user_type_id, name="User"),
            created_at=datetime.now(UTC),
        )

    def login(self, **_: object) -> None:
        raise AssertionError("handler must not run when validation fails")


class _SettingsEnvCase(unittest.TestCase):
    _env_keys = (
        "BOOKSTORE_AUTH_PROVIDER",
        "BOOKSTORE_JWT_ACCESS_SECRET",
        "BOOKSTORE_COOKIE_SECURE",
    )

    def setUp(self) -> None:
        self._old_env = {k: os.environ.get(k) for k in self._env_keys}
        os.environ["BOOKSTORE_AUTH_PROVIDER"] = "mock"
        os.environ["BOOKSTORE_JWT_ACCESS_SECRET"] = "test-access-secret-0123456789abcdef"
        os.environ["BOOKSTORE_COOKIE_SECURE"] = "false"
        get_settings.cache_clear()

    def tearDown(self) -> None:
        for key, value in self._old_env.items():
            if value is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = value
        get_settings.cache_clear()


class BodyValidationApiTests(_SettingsEnvCase):
    def setUp(self) -> None:
        super().setUp()
        self.service = _CapturingAuthService()
        self.app = create_app()
        self.app.dependency_overrides[get_auth_service] = lambda: self.service
        self.client = TestClient(self.app)

    def test_invalid_email_rejected_before_handler(self) -> None:
        response = self.client.post(
            "/api/v1/auth/login",
            json={"email": "not-an-email", "password": "Str0ng!pass"},
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"success": False, "message": "Invalid email"})

    def test_missing_required_field(self) -> None:
        response = self.client.post("/api/v1/auth/login", json={"email": "reader@bookstore.io"})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "password is required")

    def test_unparsable_or_non_object_body(self) -> None:
        for content in (b"not json", b"[1, 2]", b""):
            with self.subTest(content=content):
                response = self.client.post(
                    "/api/v1/auth/login",
                    content=content,
                    headers={"Content-Type": "application/json"},
                )
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json(), {"success": False, "message": "Provide a valid JSON body"})

    def test_handler_receives_typed_payload_once(self) -> None:
        response = self.client.post(
            "/api/v1/auth/register",
            json={
                "fullName": "Ada Lovelace",
                "email": "ada@bookstore.io",
                "password": "Str0ng!pass",
                "userType": "3",
            },
        )

        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["message"], "User registered successfully")
        self.assertEqual(body["data"]["fullName"], "Ada Lovelace")
        self.assertEqual(len(self.service.registered), 1)
        self.assertEqual(self.service.registered[0]["user_type_id"], 3)

    def test_register_name_with_digits_is_rejected(self) -> None:
        response = self.client.post(
            "/api/v1/auth/register",
            json={
                "fullName": "Ada 2",
                "email": "ada@bookstore.io",
                "password": "Str0ng!pass",
                "userType": 3,
            },
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "Enter a valid fullName")
        self.assertEqual(self.service.registered, [])


class QueryValidationApiTests(_SettingsEnvCase):
    def test_query_values_are_validated(self) -> None:
        client = TestClient(create_app())
        cases = (
            ("/api/v1/books?limit=abc", "Provide a valid Integer value for limit"),
            ("/api/v1/books?page=0", "Invalid page"),
            ("/api/v1/books?isFree=maybe", "Provide a valid boolean value"),
            ("/api/v1/books?sort=price", "Provide sort as field:asc or field:desc"),
        )
        for url, message in cases:
            with self.subTest(url=url):
                response = client.get(url)
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json(), {"success": False, "message": message})

    def test_oversized_integer_is_a_validation_error(self) -> None:
        client = TestClient(create_app())
        response = client.get("/api/v1/books", params={"limit": "9" * 5000})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.json(),
            {"success": False, "message": "Provide a valid Integer value for limit"},
        )

    def test_valid_query_reaches_handler(self) -> None:
        client = TestClient(create_app())
        response = client.get("/api/v1/books?limit=5&page=1&sort=price:asc&isFree=true")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json()["data"]["pagination"],
            {"total": 0, "page": 1, "limit": 5, "pages": 0},
        )


class UnexpectedValidationFailureTests(_SettingsEnvCase):
    def test_unexpected_exception_becomes_500_with_message(self) -> None:
        def exploding_hook(_: object) -> bool:
            raise RuntimeError("hook exploded")

        schema = (PrimitiveField(field="name", type=FieldType.STRING, validate=exploding_hook),)
        app = create_app()
        calls: list[ValidatedPayload] = []

        @app.post("/probe")
        async def probe(payload: Annotated[ValidatedPayload, Depends(validated_body(schema))]) -> dict:
            calls.append(payload)
            return {"ok": True}

        response = TestClient(app).post("/probe", json={"name": "x"})

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"success": False, "message": "hook exploded"})
        self.assertEqual(calls, [])

    def test_validated_payload_is_recorded_on_request_state(self) -> None:
        schema = (PrimitiveField(field="count", type=FieldType.INTEGER),)
        app = create_app()

        @app.post("/probe")
        async def probe(
            request: Request,
            payload: Annotated[ValidatedPayload, Depends(validated_body(schema))],
        ) -> dict:
            return {"state": request.state.validated_body, "payload": payload}

        response = TestClient(app).post("/probe", json={"count": "7"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"state": {"count": 7}, "payload": {"count": 7}})


if __name__ == "__main__":
    unittest.main()
