"""Authentication provider interfaces."""

from abc import ABC, abstractmethod

from bookstore.schemas.auth import Identity


class AuthVerificationError(Exception):
    """Raised when a token cannot be verified or mapped to an identity."""


class TokenVerifier(ABC):
    """Provider-neutral access token verification."""

    @abstractmethod
    def verify_token(self, token: str) -> Identity:
        """Verify token and return the caller identity."""


__all__ = ["AuthVerificationError", "TokenVerifier"]
