"""Auth verifier adapters."""

from .base import AuthVerificationError, TokenVerifier
from .jwt_auth import JwtTokenVerifier
from .mock_auth import MockTokenVerifier

__all__ = [
    "AuthVerificationError",
    "TokenVerifier",
    "JwtTokenVerifier",
    "MockTokenVerifier",
]
