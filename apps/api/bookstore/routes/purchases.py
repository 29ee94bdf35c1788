"""Purchase routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from bookstore.domain.roles import Permission
from bookstore.routes import request_schemas
from bookstore.routes.dependencies import (
    AuthenticatedIdentity,
    get_authenticated_identity,
    get_purchase_service,
    require_permission,
)
from bookstore.routes.validation import ValidatedPayload, validated_body, validated_params
from bookstore.schemas.common import ApiResponse, ok
from bookstore.schemas.error import ErrorResponse
from bookstore.schemas.purchase import CreatePurchaseRequest, Purchase, UpdatePurchaseStatusRequest
from bookstore.services.purchases import PurchaseService

router = APIRouter(
    prefix="/purchases",
    tags=["Purchases"],
    dependencies=[Depends(get_authenticated_identity)],
    responses={401: {"model": ErrorResponse}},
)


@router.get("", response_model=ApiResponse[list[Purchase]])
async def list_purchases(
    identity: AuthenticatedIdentity,
    service: Annotated[PurchaseService, Depends(get_purchase_service)],
) -> ApiResponse[list[Purchase]]:
    return ok(service.list_purchases(user_id=identity.user_id), "Purchases retrieved successfully")


@router.get(
    "/{id}",
    response_model=ApiResponse[Purchase],
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_purchase(
    identity: AuthenticatedIdentity,
    params: Annotated[ValidatedPayload, Depends(validated_params(request_schemas.ID_PARAMS))],
    service: Annotated[PurchaseService, Depends(get_purchase_service)],
) -> ApiResponse[Purchase]:
    purchase = service.get_purchase(user_id=identity.user_id, purchase_id=params["id"])
    return ok(purchase, "Purchase retrieved successfully")


@router.post(
    "",
    response_model=ApiResponse[Purchase],
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def create_purchase(
    identity: AuthenticatedIdentity,
    payload: Annotated[ValidatedPayload, Depends(validated_body(request_schemas.CREATE_PURCHASE))],
    service: Annotated[PurchaseService, Depends(get_purchase_service)],
) -> ApiResponse[Purchase]:
    request = CreatePurchaseRequest.model_validate(payload)
    purchase = service.create_purchase(user_id=identity.user_id, book_id=request.book_id)
    return ok(purchase, "Purchase created successfully")


@router.put(
    "/{id}/status",
    response_model=ApiResponse[Purchase],
    dependencies=[Depends(require_permission(Permission.PURCHASES_MANAGE))],
    responses={400: {"model": ErrorResponse}, 403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_purchase_status(
    params: Annotated[ValidatedPayload, Depends(validated_params(request_schemas.ID_PARAMS))],
    payload: Annotated[ValidatedPayload, Depends(validated_body(request_schemas.UPDATE_PURCHASE_STATUS))],
    service: Annotated[PurchaseService, Depends(get_purchase_service)],
) -> ApiResponse[Purchase]:
    request = UpdatePurchaseStatusRequest.model_validate(payload)
    purchase = service.update_status(purchase_id=params["id"], status=request.status)
    return ok(purchase, "Purchase status updated successfully")
