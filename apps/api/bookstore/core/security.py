"""Password hashing and signed token primitives."""

from __future__ import annotations

import logging
import secrets
from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import Any

import bcrypt
import jwt

from bookstore.core.config import Settings

logger = logging.getLogger(__name__)

_BCRYPT_ROUNDS = 10


class TokenType(str, Enum):
    ACCESS = "accessToken"
    REFRESH = "refreshToken"


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=_BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(password: str, hashed: str | None) -> bool:
    if not hashed:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        logger.warning("security.password_hash_malformed")
        return False


def generate_reset_token() -> str:
    return secrets.token_hex(32)


def _secret_for(token_type: TokenType, settings: Settings) -> str:
    if token_type is TokenType.ACCESS:
        return settings.jwt_access_secret
    return settings.refresh_secret


def _ttl_for(token_type: TokenType, settings: Settings) -> timedelta:
    if token_type is TokenType.ACCESS:
        return timedelta(minutes=settings.access_token_ttl_minutes)
    return timedelta(minutes=settings.refresh_token_ttl_minutes)


def issue_token(claims: dict[str, Any], settings: Settings, token_type: TokenType = TokenType.ACCESS) -> str:
    now = datetime.now(UTC)
    payload = {**claims, "iat": now, "exp": now + _ttl_for(token_type, settings)}
    return jwt.encode(payload, _secret_for(token_type, settings), algorithm=settings.jwt_algorithm)


def decode_token(token: str, settings: Settings, token_type: TokenType = TokenType.ACCESS) -> dict[str, Any] | None:
    """Return the verified claims, or ``None`` for expired, tampered or malformed tokens."""
    try:
        return jwt.decode(token, _secret_for(token_type, settings), algorithms=[settings.jwt_algorithm])
    except jwt.PyJWTError as exc:
        logger.info("security.token_rejected reason=%s", type(exc).__name__)
        return None
