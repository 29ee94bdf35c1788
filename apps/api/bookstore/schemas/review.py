"""Review API schemas."""

from datetime import datetime

from bookstore.schemas.common import CamelModel


class ReviewUser(CamelModel):
    id: str
    full_name: str
    email: str


class ReviewBook(CamelModel):
    id: str
    title: str
    author: str
    cover_image: str | None = None


class Review(CamelModel):
    id: str
    user_id: str
    book_id: str
    rating: int
    comment: str | None = None
    created_at: datetime
    updated_at: datetime | None = None
    user: ReviewUser | None = None
    book: ReviewBook | None = None


class CreateReviewRequest(CamelModel):
    book_id: str
    rating: int
    comment: str | None = None


class UpdateReviewRequest(CamelModel):
    rating: int | None = None
    comment: str | None = None
