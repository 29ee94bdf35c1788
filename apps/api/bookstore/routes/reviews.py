"""Review routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from bookstore.routes import request_schemas
from bookstore.routes.dependencies import AuthenticatedIdentity, get_review_service
from bookstore.routes.validation import ValidatedPayload, validated_body, validated_params
from bookstore.schemas.common import ApiResponse, ok
from bookstore.schemas.error import ErrorResponse
from bookstore.schemas.review import CreateReviewRequest, Review, UpdateReviewRequest
from bookstore.services.reviews import ReviewService

router = APIRouter(prefix="/reviews", tags=["Reviews"])

_owner_responses = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


@router.get("/book/{bookId}", response_model=ApiResponse[list[Review]], responses={404: {"model": ErrorResponse}})
async def list_book_reviews(
    params: Annotated[ValidatedPayload, Depends(validated_params(request_schemas.BOOK_ID_PARAMS))],
    service: Annotated[ReviewService, Depends(get_review_service)],
) -> ApiResponse[list[Review]]:
    return ok(service.list_book_reviews(book_id=params["bookId"]), "Book reviews retrieved successfully")


@router.get("/{id}", response_model=ApiResponse[Review], responses={404: {"model": ErrorResponse}})
async def get_review(
    params: Annotated[ValidatedPayload, Depends(validated_params(request_schemas.ID_PARAMS))],
    service: Annotated[ReviewService, Depends(get_review_service)],
) -> ApiResponse[Review]:
    return ok(service.get_review(review_id=params["id"]), "Review retrieved successfully")


@router.post(
    "",
    response_model=ApiResponse[Review],
    status_code=status.HTTP_201_CREATED,
    responses=_owner_responses,
)
async def create_review(
    identity: AuthenticatedIdentity,
    payload: Annotated[ValidatedPayload, Depends(validated_body(request_schemas.CREATE_REVIEW))],
    service: Annotated[ReviewService, Depends(get_review_service)],
) -> ApiResponse[Review]:
    request = CreateReviewRequest.model_validate(payload)
    review = service.create_review(
        user_id=identity.user_id,
        book_id=request.book_id,
        rating=request.rating,
        comment=request.comment,
    )
    return ok(review, "Review created successfully")


@router.put("/{id}", response_model=ApiResponse[Review], responses=_owner_responses)
async def update_review(
    identity: AuthenticatedIdentity,
    params: Annotated[ValidatedPayload, Depends(validated_params(request_schemas.ID_PARAMS))],
    payload: Annotated[ValidatedPayload, Depends(validated_body(request_schemas.UPDATE_REVIEW))],
    service: Annotated[ReviewService, Depends(get_review_service)],
) -> ApiResponse[Review]:
    request = UpdateReviewRequest.model_validate(payload)
    review = service.update_review(
        user_id=identity.user_id,
        review_id=params["id"],
        rating=request.rating,
        comment=request.comment,
    )
    return ok(review, "Review updated successfully")


@router.delete("/{id}", response_model=ApiResponse[None], responses=_owner_responses)
async def delete_review(
    identity: AuthenticatedIdentity,
    params: Annotated[ValidatedPayload, Depends(validated_params(request_schemas.ID_PARAMS))],
    service: Annotated[ReviewService, Depends(get_review_service)],
) -> ApiResponse[None]:
    service.delete_review(user_id=identity.user_id, review_id=params["id"])
    return ok(None, "Review deleted successfully")
