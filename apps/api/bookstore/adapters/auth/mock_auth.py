"""Mock auth verifier for local development and tests."""

from bookstore.adapters.auth.base import AuthVerificationError, TokenVerifier
from bookstore.schemas.auth import Identity
from bookstore.domain.roles import permissions_for


class MockTokenVerifier(TokenVerifier):
    """Accepts deterministic test tokens only.

    Expected token format:
    - ``test:<user_id>``
    - ``test:<user_id>:<user_type>``
    - ``test:<user_id>:<user_type>:<perm>,<perm>``

    Without an explicit permission list the user type's default permissions apply.
    """

    def verify_token(self, token: str) -> Identity:
        parts = token.split(":", 3)
        if len(parts) not in (2, 3, 4) or parts[0] != "test":
            raise AuthVerificationError("Invalid token")

        user_id = parts[1].strip()
        user_type = parts[2].strip() if len(parts) >= 3 else "User"
        if not user_id or not user_type:
            raise AuthVerificationError("Token missing user identity")

        if len(parts) == 4:
            permissions = [p.strip() for p in parts[3].split(",") if p.strip()]
        else:
            permissions = permissions_for(user_type)

        return Identity(
            user_id=user_id,
            email=f"{user_id}@example.test",
            user_name=user_id,
            user_type=user_type,
            permissions=permissions,
        )


__all__ = ["MockTokenVerifier"]
