"""Dependency wiring for routes."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Request

from bookstore.adapters.auth import (
    AuthVerificationError,
    JwtTokenVerifier,
    MockTokenVerifier,
    TokenVerifier,
)
from bookstore.core.config import Settings, get_settings
from bookstore.core.logging_safety import safe_log_identifier
from bookstore.core.security import TokenType
from bookstore.domain.roles import Permission, UserRole
from bookstore.errors import (
    ApiError,
    AuthorizationDeniedError,
    CredentialInvalidError,
    CredentialMissingError,
)
from bookstore.repositories.memory import InMemoryStore
from bookstore.schemas.auth import Identity
from bookstore.services.admin import AdminService
from bookstore.services.auth import AuthService
from bookstore.services.books import BookService
from bookstore.services.categories import CategoryService
from bookstore.services.library import LibraryService
from bookstore.services.purchases import PurchaseService
from bookstore.services.reviews import ReviewService
from bookstore.services.users import UserService

logger = logging.getLogger(__name__)

TOKEN_HEADER = "x-auth-token"


def get_token_verifier(settings: Annotated[Settings, Depends(get_settings)]) -> TokenVerifier:
    """Resolve provider adapter from configuration."""
    if settings.auth_provider == "mock":
        return MockTokenVerifier()
    return JwtTokenVerifier(settings)


def extract_token(request: Request) -> str | None:
    """First non-empty credential from header, query, cookie, then ``Authorization``."""
    candidates = (
        request.headers.get(TOKEN_HEADER),
        request.query_params.get(TokenType.ACCESS.value),
        request.cookies.get(TokenType.ACCESS.value),
    )
    for candidate in candidates:
        if candidate:
            return candidate

    parts = request.headers.get("authorization", "").split()
    if len(parts) >= 2 and parts[1]:
        return parts[1]
    return None


async def get_authenticated_identity(
    request: Request,
    verifier: Annotated[TokenVerifier, Depends(get_token_verifier)],
) -> Identity:
    """Verify the caller's access token and attach the identity to request state."""
    token = extract_token(request)
    if token is None:
        logger.warning(
            "auth.rejected method=%s path=%s reason=missing_token",
            request.method,
            request.url.path,
        )
        raise CredentialMissingError()

    try:
        identity = verifier.verify_token(token)
    except AuthVerificationError as exc:
        logger.warning(
            "auth.rejected method=%s path=%s reason=token_verification_failed",
            request.method,
            request.url.path,
        )
        raise CredentialInvalidError() from exc
    except Exception as exc:
        logger.exception("auth.failed method=%s path=%s", request.method, request.url.path)
        raise ApiError(status_code=500, code="INTERNAL_ERROR", message=str(exc) or "Internal Server Error") from exc

    logger.info(
        "auth.accepted method=%s path=%s user_id=%s user_type=%s",
        request.method,
        request.url.path,
        safe_log_identifier(identity.user_id, prefix="uid"),
        identity.user_type,
    )
    request.state.identity = identity
    return identity


AuthenticatedIdentity = Annotated[Identity, Depends(get_authenticated_identity)]


def require_roles(*roles: UserRole | str) -> Callable[[Identity], Identity]:
    """Admit callers whose user type is one of ``roles``."""
    allowed = frozenset(role.value if isinstance(role, UserRole) else role for role in roles)

    def dependency(identity: AuthenticatedIdentity) -> Identity:
        if identity.user_type not in allowed:
            logger.warning(
                "auth.forbidden user_id=%s user_type=%s reason=role",
                safe_log_identifier(identity.user_id, prefix="uid"),
                identity.user_type,
            )
            raise AuthorizationDeniedError()
        return identity

    return dependency


def require_permission(name: Permission | str) -> Callable[[Identity], Identity]:
    """Admit callers whose token carries the ``name`` permission."""
    permission = name.value if isinstance(name, Permission) else name

    def dependency(identity: AuthenticatedIdentity) -> Identity:
        if permission not in identity.permissions:
            logger.warning(
                "auth.forbidden user_id=%s permission=%s reason=permission",
                safe_log_identifier(identity.user_id, prefix="uid"),
                permission,
            )
            raise AuthorizationDeniedError()
        return identity

    return dependency


def get_store(request: Request) -> InMemoryStore:
    return request.app.state.store


def get_auth_service(
    store: Annotated[InMemoryStore, Depends(get_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthService:
    return AuthService(store, settings)


def get_book_service(store: Annotated[InMemoryStore, Depends(get_store)]) -> BookService:
    return BookService(store)


def get_category_service(store: Annotated[InMemoryStore, Depends(get_store)]) -> CategoryService:
    return CategoryService(store)


def get_purchase_service(store: Annotated[InMemoryStore, Depends(get_store)]) -> PurchaseService:
    return PurchaseService(store)


def get_library_service(store: Annotated[InMemoryStore, Depends(get_store)]) -> LibraryService:
    return LibraryService(store)


def get_review_service(store: Annotated[InMemoryStore, Depends(get_store)]) -> ReviewService:
    return ReviewService(store)


def get_admin_service(store: Annotated[InMemoryStore, Depends(get_store)]) -> AdminService:
    return AdminService(store)


def get_user_service(store: Annotated[InMemoryStore, Depends(get_store)]) -> UserService:
    return UserService(store)
