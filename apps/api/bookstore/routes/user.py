"""Signed-in user routes."""

from typing import Annotated

from fastapi import APIRouter, Depends

from bookstore.domain.roles import UserRole
from bookstore.routes.dependencies import AuthenticatedIdentity, get_user_service, require_roles
from bookstore.schemas.admin import UserStats
from bookstore.schemas.common import ApiResponse, ok
from bookstore.schemas.error import ErrorResponse
from bookstore.services.users import UserService

router = APIRouter(
    prefix="/user",
    tags=["User"],
    dependencies=[Depends(require_roles(UserRole.USER))],
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)


@router.get("/stats", response_model=ApiResponse[UserStats])
async def user_stats(
    identity: AuthenticatedIdentity,
    service: Annotated[UserService, Depends(get_user_service)],
) -> ApiResponse[UserStats]:
    return ok(service.user_stats(user_id=identity.user_id), "User statistics fetched successfully")
