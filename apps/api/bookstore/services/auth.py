"""Account registration, login and password reset."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from urllib.parse import urlencode

from bookstore.core.config import Settings
from bookstore.core.logging_safety import mask_email, safe_log_identifier
from bookstore.core.security import (
    TokenType,
    generate_reset_token,
    hash_password,
    issue_token,
    verify_password,
)
from bookstore.domain.roles import permissions_for
from bookstore.errors import ApiError
from bookstore.repositories.memory import InMemoryStore, PasswordResetNotice, UserRecord
from bookstore.schemas.auth import Identity, User
from bookstore.services.views import to_user

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class IssuedCredentials:
    user: User
    access_token: str
    refresh_token: str


class AuthService:
    def __init__(self, store: InMemoryStore, settings: Settings) -> None:
        self._store = store
        self._settings = settings

    def register(self, *, email: str, password: str, full_name: str, user_type_id: int) -> User:
        if self._store.get_user_by_email(email) is not None:
            raise ApiError(status_code=400, code="EMAIL_TAKEN", message="Email already exists")

        user_type = self._store.get_user_type(user_type_id)
        if user_type is None:
            raise ApiError(status_code=400, code="UNKNOWN_USER_TYPE", message="User type does not exist")

        record = self._store.create_user(
            email=email,
            full_name=full_name,
            password_hash=hash_password(password),
            user_type=user_type,
        )
        logger.info(
            "auth.registered user_id=%s user_type=%s",
            safe_log_identifier(record.id, prefix="uid"),
            user_type.name,
        )
        return to_user(record)

    def login(self, *, email: str, password: str) -> IssuedCredentials:
        record = self._store.get_user_by_email(email)
        if record is None:
            logger.info("auth.login_rejected email=%s reason=unknown_user", mask_email(email))
            raise ApiError(status_code=404, code="USER_NOT_FOUND", message="User does not exist")

        if not verify_password(password, record.password_hash):
            logger.info("auth.login_rejected email=%s reason=bad_password", mask_email(email))
            raise ApiError(status_code=401, code="INVALID_PASSWORD", message="Invalid password")

        claims = self.identity_for(record).claims()
        return IssuedCredentials(
            user=to_user(record),
            access_token=issue_token(claims, self._settings, TokenType.ACCESS),
            refresh_token=issue_token(claims, self._settings, TokenType.REFRESH),
        )

    @staticmethod
    def identity_for(record: UserRecord) -> Identity:
        return Identity(
            user_id=record.id,
            email=record.email,
            user_name=record.full_name,
            user_type=record.user_type.name,
            permissions=permissions_for(record.user_type.name),
        )

    def request_password_reset(self, *, email: str) -> None:
        record = self._require_user(email)
        token = generate_reset_token()
        self._store.set_reset_token(
            record,
            token_hash=hash_password(token),
            expires_at=datetime.now(UTC) + timedelta(minutes=self._settings.password_reset_ttl_minutes),
        )
        query = urlencode({"token": token, "email": record.email})
        self._store.record_reset_notice(
            PasswordResetNotice(
                email=record.email,
                full_name=record.full_name,
                reset_url=f"{self._settings.web_url}/reset-password?{query}",
                created_at=datetime.now(UTC),
            )
        )
        logger.info("auth.reset_requested email=%s", mask_email(record.email))

    def reset_password(self, *, email: str, password: str, confirm_password: str, token: str) -> None:
        if password != confirm_password:
            raise ApiError(status_code=400, code="PASSWORD_MISMATCH", message="Passwords do not match")

        record = self._require_user(email)
        if not verify_password(token, record.reset_token_hash):
            raise ApiError(status_code=400, code="INVALID_RESET_TOKEN", message="Invalid token")

        if record.reset_expiry is None or datetime.now(UTC) > record.reset_expiry:
            raise ApiError(status_code=400, code="RESET_TOKEN_EXPIRED", message="Token expired")

        self._store.set_password(record, password_hash=hash_password(password))
        logger.info("auth.password_reset email=%s", mask_email(record.email))

    def _require_user(self, email: str) -> UserRecord:
        record = self._store.get_user_by_email(email)
        if record is None:
            raise ApiError(status_code=404, code="EMAIL_NOT_FOUND", message="Email does not exist")
        return record
