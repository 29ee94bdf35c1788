"""Registration, login and password reset tests against the JWT provider."""

from datetime import UTC, datetime, timedelta
import os
import unittest
from urllib.parse import parse_qs, urlsplit

from fastapi.testclient import TestClient

from bookstore.core.config import get_settings
from bookstore.main import create_app

PASSWORD = "Str0ng!pass"
NEW_PASSWORD = "N3w!passphrase"


class _SettingsEnvCase(unittest.TestCase):
    _env_keys = (
        "BOOKSTORE_AUTH_PROVIDER",
        "BOOKSTORE_JWT_ACCESS_SECRET",
        "BOOKSTORE_COOKIE_SECURE",
        "BOOKSTORE_WEB_URL",
    )

    def setUp(self) -> None:
        self._old_env = {k: os.environ.get(k) for k in self._env_keys}
        os.environ["BOOKSTORE_AUTH_PROVIDER"] = "jwt"
        os.environ["BOOKSTORE_JWT_ACCESS_SECRET"] = "test-access-secret-0123456789abcdef"
        os.environ["BOOKSTORE_COOKIE_SECURE"] = "false"
        os.environ["BOOKSTORE_WEB_URL"] = "https://books.test"
        get_settings.cache_clear()

    def tearDown(self) -> None:
        for key, value in self._old_env.items():
            if value is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = value
        get_settings.cache_clear()


class AuthFlowApiTests(_SettingsEnvCase):
    def setUp(self) -> None:
        super().setUp()
        self.app = create_app()
        self.client = TestClient(self.app)

    def _register(self, email: str = "ada@bookstore.io", user_type: int = 3, full_name: str = "Ada Lovelace"):
        return self.client.post(
            "/api/v1/auth/register",
            json={"fullName": full_name, "email": email, "password": PASSWORD, "userType": user_type},
        )

    def _login(self, email: str = "ada@bookstore.io", password: str = PASSWORD):
        return self.client.post("/api/v1/auth/login", json={"email": email, "password": password})

    def test_register_then_login_issues_usable_token_and_cookies(self) -> None:
        registered = self._register()
        self.assertEqual(registered.status_code, 201)
        user = registered.json()["data"]
        self.assertEqual(user["userType"], {"id": 3, "name": "User"})
        self.assertNotIn("password", user)
        self.assertNotIn("passwordHash", user)

        login = self._login()
        self.assertEqual(login.status_code, 200)
        body = login.json()
        self.assertEqual(body["message"], "User logged in successfully")
        self.assertEqual(body["data"]["user"]["email"], "ada@bookstore.io")

        set_cookies = login.headers.get_list("set-cookie")
        self.assertTrue(any(c.startswith("accessToken=") for c in set_cookies))
        self.assertTrue(any(c.startswith("refreshToken=") for c in set_cookies))
        self.assertTrue(all("httponly" in c.lower() for c in set_cookies))

        token = body["data"]["accessToken"]
        stats = self.client.get("/api/v1/user/stats", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(stats.status_code, 200)

        admin_only = self.client.get("/api/v1/admin/stats", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(admin_only.status_code, 403)

    def test_admin_token_carries_staff_permissions(self) -> None:
        self._register(email="grace@bookstore.io", user_type=2, full_name="Grace Hopper")
        token = self._login(email="grace@bookstore.io").json()["data"]["accessToken"]

        response = self.client.put(
            "/api/v1/purchases/missing/status",
            headers={"x-auth-token": token},
            json={"status": "COMPLETED"},
        )
        self.assertEqual(response.status_code, 404)

    def test_registration_conflicts(self) -> None:
        self._register()

        duplicate = self._register(email="ADA@bookstore.io")
        self.assertEqual(duplicate.status_code, 400)
        self.assertEqual(duplicate.json(), {"success": False, "message": "Email already exists"})

        unknown_type = self._register(email="bob@bookstore.io", user_type=9)
        self.assertEqual(unknown_type.status_code, 400)
        self.assertEqual(unknown_type.json()["message"], "User type does not exist")

    def test_login_failures(self) -> None:
        self._register()

        unknown = self._login(email="nobody@bookstore.io")
        self.assertEqual(unknown.status_code, 404)
        self.assertEqual(unknown.json()["message"], "User does not exist")

        wrong = self._login(password="Wr0ng!pass")
        self.assertEqual(wrong.status_code, 401)
        self.assertEqual(wrong.json()["message"], "Invalid password")

    def test_password_reset_round_trip(self) -> None:
        self._register()

        requested = self.client.post("/api/v1/auth/forgot-password", json={"email": "ada@bookstore.io"})
        self.assertEqual(requested.status_code, 200)
        self.assertEqual(requested.json()["message"], "Reset password email sent successfully")

        notice = self.app.state.store.reset_notices[-1]
        url = urlsplit(notice.reset_url)
        self.assertEqual(f"{url.scheme}://{url.netloc}{url.path}", "https://books.test/reset-password")
        query = parse_qs(url.query)
        self.assertEqual(query["email"], ["ada@bookstore.io"])
        token = query["token"][0]

        def reset(**overrides: str):
            payload = {
                "password": NEW_PASSWORD,
                "confirmPassword": NEW_PASSWORD,
                "token": token,
                "email": "ada@bookstore.io",
            }
            payload.update(overrides)
            return self.client.post("/api/v1/auth/reset-password", json=payload)

        mismatch = reset(confirmPassword="Oth3r!passphrase")
        self.assertEqual(mismatch.status_code, 400)
        self.assertEqual(mismatch.json()["message"], "Passwords do not match")

        wrong_token = reset(token="0" * 64)
        self.assertEqual(wrong_token.status_code, 400)
        self.assertEqual(wrong_token.json()["message"], "Invalid token")

        done = reset()
        self.assertEqual(done.status_code, 200)
        self.assertEqual(done.json()["message"], "Password updated successfully")

        self.assertEqual(self._login().status_code, 401)
        self.assertEqual(self._login(password=NEW_PASSWORD).status_code, 200)

        reused = reset()
        self.assertEqual(reused.status_code, 400)
        self.assertEqual(reused.json()["message"], "Invalid token")

    def test_expired_reset_token(self) -> None:
        self._register()
        self.client.post("/api/v1/auth/forgot-password", json={"email": "ada@bookstore.io"})
        token = parse_qs(urlsplit(self.app.state.store.reset_notices[-1].reset_url).query)["token"][0]

        user = self.app.state.store.get_user_by_email("ada@bookstore.io")
        user.reset_expiry = datetime.now(UTC) - timedelta(minutes=1)

        response = self.client.post(
            "/api/v1/auth/reset-password",
            json={
                "password": NEW_PASSWORD,
                "confirmPassword": NEW_PASSWORD,
                "token": token,
                "email": "ada@bookstore.io",
            },
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "Token expired")

    def test_unknown_email_reset_request(self) -> None:
        response = self.client.post("/api/v1/auth/forgot-password", json={"email": "ghost@bookstore.io"})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["message"], "Email does not exist")

    def test_admin_user_listing_only_shows_readers(self) -> None:
        self._register()
        self._register(email="alan@bookstore.io", full_name="Alan Turing")
        self._register(email="grace@bookstore.io", user_type=2, full_name="Grace Hopper")
        admin_token = self._login(email="grace@bookstore.io").json()["data"]["accessToken"]
        headers = {"x-auth-token": admin_token}

        everyone = self.client.get("/api/v1/admin/users", headers=headers).json()["data"]
        self.assertEqual(everyone["pagination"]["total"], 2)

        searched = self.client.get("/api/v1/admin/users?search=turing", headers=headers).json()["data"]
        self.assertEqual([u["email"] for u in searched["data"]], ["alan@bookstore.io"])


if __name__ == "__main__":
    unittest.main()
