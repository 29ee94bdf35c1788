"""FastAPI application entrypoint."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bookstore.errors import ApiError
from bookstore.repositories.memory import InMemoryStore
from bookstore.routes import (
    admin_router,
    auth_router,
    books_router,
    categories_router,
    library_router,
    purchases_router,
    reviews_router,
    user_router,
)
from bookstore.schemas.common import ok
from bookstore.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ())[1:])
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


def create_app() -> FastAPI:
    app = FastAPI(title="Bookstore API", version="1.0.0")
    app.state.store = InMemoryStore()

    @app.exception_handler(ApiError)
    async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(
                "request.failed method=%s path=%s status=%s code=%s",
                request.method,
                request.url.path,
                exc.status_code,
                exc.code,
            )
        return JSONResponse(status_code=exc.status_code, content=exc.payload.model_dump())

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        payload = ErrorResponse(message=_first_validation_message(exc))
        return JSONResponse(status_code=400, content=payload.model_dump())

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("request.crashed method=%s path=%s", request.method, request.url.path)
        payload = ErrorResponse(message=str(exc) or "Internal Server Error")
        return JSONResponse(status_code=500, content=payload.model_dump())

    @app.get("/", include_in_schema=False)
    async def welcome() -> dict:
        return ok(None, "Welcome to the Bookstore API").model_dump()

    app.include_router(auth_router, prefix=API_PREFIX)
    app.include_router(books_router, prefix=API_PREFIX)
    app.include_router(categories_router, prefix=API_PREFIX)
    app.include_router(purchases_router, prefix=API_PREFIX)
    app.include_router(library_router, prefix=API_PREFIX)
    app.include_router(reviews_router, prefix=API_PREFIX)
    app.include_router(admin_router, prefix=API_PREFIX)
    app.include_router(user_router, prefix=API_PREFIX)

    return app


app = create_app()
