"""Category routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from bookstore.domain.roles import UserRole
from bookstore.routes import request_schemas
from bookstore.routes.dependencies import get_category_service, require_roles
from bookstore.routes.validation import ValidatedPayload, validated_body, validated_params, validated_query
from bookstore.schemas.book import Book
from bookstore.schemas.category import Category, CreateCategoryRequest, UpdateCategoryRequest
from bookstore.schemas.common import ApiResponse, Page, ok
from bookstore.schemas.error import ErrorResponse
from bookstore.services.categories import CategoryService

router = APIRouter(prefix="/categories", tags=["Categories"])

_admin_only = [Depends(require_roles(UserRole.ADMIN))]
_write_responses = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
}


@router.get("", response_model=ApiResponse[list[Category]])
async def list_categories(
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> ApiResponse[list[Category]]:
    return ok(service.list_categories(), "Categories retrieved successfully")


@router.get("/{id}", response_model=ApiResponse[Category], responses={404: {"model": ErrorResponse}})
async def get_category(
    params: Annotated[ValidatedPayload, Depends(validated_params(request_schemas.ID_PARAMS))],
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> ApiResponse[Category]:
    return ok(service.get_category(category_id=params["id"]), "Category retrieved successfully")


@router.get("/{id}/books", response_model=ApiResponse[Page[Book]], responses={404: {"model": ErrorResponse}})
async def list_category_books(
    params: Annotated[ValidatedPayload, Depends(validated_params(request_schemas.ID_PARAMS))],
    query: Annotated[ValidatedPayload, Depends(validated_query(request_schemas.PAGINATION_QUERY))],
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> ApiResponse[Page[Book]]:
    books = service.list_books(
        category_id=params["id"],
        page=query.get("page", 1),
        limit=query.get("limit", 10),
    )
    return ok(books, "Books retrieved successfully")


@router.post(
    "",
    response_model=ApiResponse[Category],
    status_code=status.HTTP_201_CREATED,
    dependencies=_admin_only,
    responses=_write_responses,
)
async def create_category(
    payload: Annotated[ValidatedPayload, Depends(validated_body(request_schemas.CREATE_CATEGORY))],
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> ApiResponse[Category]:
    request = CreateCategoryRequest.model_validate(payload)
    category = service.create_category(name=request.name, description=request.description)
    return ok(category, "Category created successfully")


@router.put(
    "/{id}",
    response_model=ApiResponse[Category],
    dependencies=_admin_only,
    responses={**_write_responses, 404: {"model": ErrorResponse}},
)
async def update_category(
    params: Annotated[ValidatedPayload, Depends(validated_params(request_schemas.ID_PARAMS))],
    payload: Annotated[ValidatedPayload, Depends(validated_body(request_schemas.UPDATE_CATEGORY))],
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> ApiResponse[Category]:
    request = UpdateCategoryRequest.model_validate(payload)
    category = service.update_category(
        category_id=params["id"],
        name=request.name,
        description=request.description,
    )
    return ok(category, "Category updated successfully")


@router.delete(
    "/{id}",
    response_model=ApiResponse[None],
    dependencies=_admin_only,
    responses={**_write_responses, 404: {"model": ErrorResponse}},
)
async def delete_category(
    params: Annotated[ValidatedPayload, Depends(validated_params(request_schemas.ID_PARAMS))],
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> ApiResponse[None]:
    service.delete_category(category_id=params["id"])
    return ok(None, "Category deleted successfully")
