"""Route dependencies that run a validation schema over one request source."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Annotated, Any, Literal

from fastapi import Depends, Request

from bookstore.core.config import Settings, get_settings
from bookstore.errors import ApiError
from bookstore.validation import Schema, rules_for_policy, walk

logger = logging.getLogger(__name__)

Source = Literal["body", "params", "query"]
ValidatedPayload = dict[str, Any]


def _invalid_body() -> ApiError:
    return ApiError(status_code=400, code="INVALID_JSON_BODY", message="Provide a valid JSON body")


async def _read_body(request: Request) -> Mapping[str, Any]:
    try:
        payload = await request.json()
    except ValueError as exc:
        raise _invalid_body() from exc
    if not isinstance(payload, dict):
        raise _invalid_body()
    return payload


async def _read_source(request: Request, source: Source) -> Mapping[str, Any]:
    if source == "body":
        return await _read_body(request)
    if source == "params":
        return dict(request.path_params)
    return dict(request.query_params)


def _validate(request: Request, source: Source, schema: Schema, payload: Mapping[str, Any], settings: Settings) -> ValidatedPayload:
    try:
        typed = walk(schema, payload, rules_for_policy(settings.password_policy))
    except ApiError as exc:
        logger.info(
            "validation.rejected method=%s path=%s source=%s field=%s status=%s",
            request.method,
            request.url.path,
            source,
            getattr(exc, "field", "-"),
            exc.status_code,
        )
        raise
    except Exception as exc:
        logger.exception(
            "validation.failed method=%s path=%s source=%s",
            request.method,
            request.url.path,
            source,
        )
        raise ApiError(status_code=500, code="INTERNAL_ERROR", message=str(exc) or "Internal Server Error") from exc

    setattr(request.state, f"validated_{source}", typed)
    return typed


def _validated(source: Source, schema: Schema) -> Callable[..., Awaitable[ValidatedPayload]]:
    schema = tuple(schema)

    async def dependency(
        request: Request,
        settings: Annotated[Settings, Depends(get_settings)],
    ) -> ValidatedPayload:
        payload = await _read_source(request, source)
        return _validate(request, source, schema, payload, settings)

    dependency.__name__ = f"validated_{source}"
    return dependency


def validated_body(schema: Schema) -> Callable[..., Awaitable[ValidatedPayload]]:
    """Validate the JSON object body; the handler receives the typed copy."""
    return _validated("body", schema)


def validated_params(schema: Schema) -> Callable[..., Awaitable[ValidatedPayload]]:
    return _validated("params", schema)


def validated_query(schema: Schema) -> Callable[..., Awaitable[ValidatedPayload]]:
    return _validated("query", schema)


__all__ = ["ValidatedPayload", "validated_body", "validated_params", "validated_query"]
