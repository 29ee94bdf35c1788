"""Signed JWT access token verifier."""

from __future__ import annotations

from pydantic import ValidationError

from bookstore.adapters.auth.base import AuthVerificationError, TokenVerifier
from bookstore.core.config import Settings
from bookstore.core.security import TokenType, decode_token
from bookstore.schemas.auth import Identity


class JwtTokenVerifier(TokenVerifier):
    """Verifies tokens issued at login and rebuilds the caller identity."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def verify_token(self, token: str) -> Identity:
        claims = decode_token(token, self._settings, TokenType.ACCESS)
        if claims is None:
            raise AuthVerificationError("Invalid token")

        try:
            return Identity.model_validate(claims)
        except ValidationError as exc:
            raise AuthVerificationError("Token missing user identity") from exc


__all__ = ["JwtTokenVerifier"]
