"""Admin dashboard routes."""

from typing import Annotated

from fastapi import APIRouter, Depends

from bookstore.domain.roles import UserRole
from bookstore.routes import request_schemas
from bookstore.routes.dependencies import get_admin_service, require_roles
from bookstore.routes.validation import ValidatedPayload, validated_query
from bookstore.schemas.admin import DashboardStats
from bookstore.schemas.auth import User
from bookstore.schemas.common import ApiResponse, Page, ok
from bookstore.schemas.error import ErrorResponse
from bookstore.schemas.purchase import OrderStatus, Purchase
from bookstore.services.admin import AdminService

router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
    dependencies=[Depends(require_roles(UserRole.ADMIN))],
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)


@router.get("/users", response_model=ApiResponse[Page[User]])
async def list_users(
    query: Annotated[ValidatedPayload, Depends(validated_query(request_schemas.ADMIN_USERS_QUERY))],
    service: Annotated[AdminService, Depends(get_admin_service)],
) -> ApiResponse[Page[User]]:
    users = service.list_users(
        search=query.get("search"),
        page=query.get("page", 1),
        limit=query.get("limit", 10),
    )
    return ok(users, "Users retrieved successfully")


@router.get("/purchases", response_model=ApiResponse[Page[Purchase]], responses={400: {"model": ErrorResponse}})
async def list_purchases(
    query: Annotated[ValidatedPayload, Depends(validated_query(request_schemas.ADMIN_PURCHASES_QUERY))],
    service: Annotated[AdminService, Depends(get_admin_service)],
) -> ApiResponse[Page[Purchase]]:
    raw_status = query.get("status")
    purchases = service.list_purchases(
        status=OrderStatus(raw_status) if raw_status else None,
        page=query.get("page", 1),
        limit=query.get("limit", 10),
    )
    return ok(purchases, "Purchases retrieved successfully")


@router.get("/stats", response_model=ApiResponse[DashboardStats])
async def dashboard_stats(
    service: Annotated[AdminService, Depends(get_admin_service)],
) -> ApiResponse[DashboardStats]:
    return ok(service.dashboard_stats(), "Stats retrieved successfully")
