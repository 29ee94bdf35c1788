"""Book catalog routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from bookstore.domain.roles import UserRole
from bookstore.routes import request_schemas
from bookstore.routes.dependencies import get_book_service, require_roles
from bookstore.routes.validation import ValidatedPayload, validated_body, validated_params, validated_query
from bookstore.schemas.book import Book, BookDetail, BookQuery, CreateBookRequest, UpdateBookRequest
from bookstore.schemas.common import ApiResponse, Page, ok
from bookstore.schemas.error import ErrorResponse
from bookstore.services.books import BookService

router = APIRouter(prefix="/books", tags=["Books"])

_admin_only = [Depends(require_roles(UserRole.ADMIN))]
_write_responses = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
}


@router.get("", response_model=ApiResponse[Page[Book]], responses={400: {"model": ErrorResponse}})
async def list_books(
    query: Annotated[ValidatedPayload, Depends(validated_query(request_schemas.BOOK_LIST_QUERY))],
    service: Annotated[BookService, Depends(get_book_service)],
) -> ApiResponse[Page[Book]]:
    return ok(service.list_books(BookQuery.model_validate(query)), "Books retrieved successfully")


@router.get("/{id}", response_model=ApiResponse[BookDetail], responses={404: {"model": ErrorResponse}})
async def get_book(
    params: Annotated[ValidatedPayload, Depends(validated_params(request_schemas.ID_PARAMS))],
    service: Annotated[BookService, Depends(get_book_service)],
) -> ApiResponse[BookDetail]:
    return ok(service.get_book(book_id=params["id"]), "Book retrieved successfully")


@router.post(
    "",
    response_model=ApiResponse[Book],
    status_code=status.HTTP_201_CREATED,
    dependencies=_admin_only,
    responses=_write_responses,
)
async def create_book(
    payload: Annotated[ValidatedPayload, Depends(validated_body(request_schemas.CREATE_BOOK))],
    service: Annotated[BookService, Depends(get_book_service)],
) -> ApiResponse[Book]:
    request = CreateBookRequest.model_validate(payload)
    book = service.create_book(**request.model_dump())
    return ok(book, "Book created successfully")


@router.put(
    "/{id}",
    response_model=ApiResponse[Book],
    dependencies=_admin_only,
    responses={**_write_responses, 404: {"model": ErrorResponse}},
)
async def update_book(
    params: Annotated[ValidatedPayload, Depends(validated_params(request_schemas.ID_PARAMS))],
    payload: Annotated[ValidatedPayload, Depends(validated_body(request_schemas.UPDATE_BOOK))],
    service: Annotated[BookService, Depends(get_book_service)],
) -> ApiResponse[Book]:
    request = UpdateBookRequest.model_validate(payload)
    book = service.update_book(book_id=params["id"], changes=request.model_dump(exclude_unset=True))
    return ok(book, "Book updated successfully")


@router.delete(
    "/{id}",
    response_model=ApiResponse[None],
    dependencies=_admin_only,
    responses={**_write_responses, 404: {"model": ErrorResponse}},
)
async def delete_book(
    params: Annotated[ValidatedPayload, Depends(validated_params(request_schemas.ID_PARAMS))],
    service: Annotated[BookService, Depends(get_book_service)],
) -> ApiResponse[None]:
    service.delete_book(book_id=params["id"])
    return ok(None, "Book deleted successfully")
