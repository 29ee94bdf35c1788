"""Authentication routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from bookstore.core.config import Settings, get_settings
from bookstore.core.security import TokenType
from bookstore.routes import request_schemas
from bookstore.routes.dependencies import get_auth_service
from bookstore.routes.validation import ValidatedPayload, validated_body
from bookstore.schemas.auth import (
    ForgotPasswordRequest,
    LoginRequest,
    LoginResult,
    RegisterRequest,
    ResetPasswordRequest,
    User,
)
from bookstore.schemas.common import ApiResponse, ok
from bookstore.schemas.error import ErrorResponse
from bookstore.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])


def _set_credential_cookies(response: Response, settings: Settings, *, access_token: str, refresh_token: str) -> None:
    cookies = (
        (TokenType.REFRESH, refresh_token, settings.refresh_token_ttl_minutes),
        (TokenType.ACCESS, access_token, settings.access_token_ttl_minutes),
    )
    for token_type, value, ttl_minutes in cookies:
        response.set_cookie(
            key=token_type.value,
            value=value,
            max_age=ttl_minutes * 60,
            httponly=True,
            samesite=settings.cookie_samesite,
            secure=settings.cookie_secure,
        )


@router.post(
    "/login",
    response_model=ApiResponse[LoginResult],
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def login(
    response: Response,
    payload: Annotated[ValidatedPayload, Depends(validated_body(request_schemas.LOGIN))],
    service: Annotated[AuthService, Depends(get_auth_service)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> ApiResponse[LoginResult]:
    request = LoginRequest.model_validate(payload)
    issued = service.login(email=request.email, password=request.password)
    _set_credential_cookies(
        response,
        settings,
        access_token=issued.access_token,
        refresh_token=issued.refresh_token,
    )
    return ok(LoginResult(user=issued.user, access_token=issued.access_token), "User logged in successfully")


@router.post(
    "/register",
    response_model=ApiResponse[User],
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def register(
    payload: Annotated[ValidatedPayload, Depends(validated_body(request_schemas.REGISTER))],
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> ApiResponse[User]:
    request = RegisterRequest.model_validate(payload)
    user = service.register(
        email=request.email,
        password=request.password,
        full_name=request.full_name,
        user_type_id=request.user_type,
    )
    return ok(user, "User registered successfully")


@router.post(
    "/forgot-password",
    response_model=ApiResponse[None],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def forgot_password(
    payload: Annotated[ValidatedPayload, Depends(validated_body(request_schemas.FORGOT_PASSWORD))],
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> ApiResponse[None]:
    request = ForgotPasswordRequest.model_validate(payload)
    service.request_password_reset(email=request.email)
    return ok(None, "Reset password email sent successfully")


@router.post(
    "/reset-password",
    response_model=ApiResponse[None],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def reset_password(
    payload: Annotated[ValidatedPayload, Depends(validated_body(request_schemas.RESET_PASSWORD))],
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> ApiResponse[None]:
    request = ResetPasswordRequest.model_validate(payload)
    service.reset_password(
        email=request.email,
        password=request.password,
        confirm_password=request.confirm_password,
        token=request.token,
    )
    return ok(None, "Password updated successfully")
