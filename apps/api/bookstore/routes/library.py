"""Personal library routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from bookstore.domain.roles import UserRole
from bookstore.routes import request_schemas
from bookstore.routes.dependencies import AuthenticatedIdentity, get_library_service, require_roles
from bookstore.routes.validation import ValidatedPayload, validated_body, validated_params
from bookstore.schemas.book import LibraryBook
from bookstore.schemas.common import ApiResponse, ok
from bookstore.schemas.error import ErrorResponse
from bookstore.schemas.library import AddToLibraryRequest, LibraryEntry
from bookstore.services.library import LibraryService

router = APIRouter(
    prefix="/library",
    tags=["Library"],
    dependencies=[Depends(require_roles(UserRole.USER))],
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)


@router.get("", response_model=ApiResponse[list[LibraryBook]])
async def list_library(
    identity: AuthenticatedIdentity,
    service: Annotated[LibraryService, Depends(get_library_service)],
) -> ApiResponse[list[LibraryBook]]:
    return ok(service.list_library(user_id=identity.user_id), "User library retrieved successfully")


@router.post(
    "",
    response_model=ApiResponse[LibraryEntry],
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def add_to_library(
    identity: AuthenticatedIdentity,
    payload: Annotated[ValidatedPayload, Depends(validated_body(request_schemas.ADD_TO_LIBRARY))],
    service: Annotated[LibraryService, Depends(get_library_service)],
) -> ApiResponse[LibraryEntry]:
    request = AddToLibraryRequest.model_validate(payload)
    entry = service.add_book(user_id=identity.user_id, book_id=request.book_id)
    return ok(entry, "Book added to library successfully")


@router.delete("/{bookId}", response_model=ApiResponse[None], responses={404: {"model": ErrorResponse}})
async def remove_from_library(
    identity: AuthenticatedIdentity,
    params: Annotated[ValidatedPayload, Depends(validated_params(request_schemas.BOOK_ID_PARAMS))],
    service: Annotated[LibraryService, Depends(get_library_service)],
) -> ApiResponse[None]:
    service.remove_book(user_id=identity.user_id, book_id=params["bookId"])
    return ok(None, "Book removed from library successfully")
