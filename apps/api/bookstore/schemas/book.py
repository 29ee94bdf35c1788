"""Book API schemas."""

from datetime import datetime

from bookstore.schemas.category import Category
from bookstore.schemas.common import CamelModel
from bookstore.schemas.review import Review


class Book(CamelModel):
    id: str
    title: str
    author: str
    description: str
    price: float
    is_free: bool
    published_date: datetime
    cover_image: str | None = None
    file_path: str | None = None
    created_at: datetime
    updated_at: datetime | None = None
    categories: list[Category] = []
    avg_rating: float = 0
    review_count: int = 0


class BookDetail(Book):
    reviews: list[Review] = []


class LibraryBook(Book):
    added_to_library_at: datetime


class CreateBookRequest(CamelModel):
    title: str
    author: str
    description: str
    price: float
    is_free: bool
    published_date: datetime
    categories: list[str]
    cover_image: str | None = None
    file_path: str | None = None


class UpdateBookRequest(CamelModel):
    title: str | None = None
    author: str | None = None
    description: str | None = None
    price: float | None = None
    is_free: bool | None = None
    published_date: datetime | None = None
    categories: list[str] | None = None
    cover_image: str | None = None
    file_path: str | None = None


class BookQuery(CamelModel):
    category: str | None = None
    is_free: bool | None = None
    search: str | None = None
    sort: str | None = None
    limit: int = 10
    page: int = 1
