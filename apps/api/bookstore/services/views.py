"""Record to response-model mapping shared by the catalog services."""

from __future__ import annotations

from bookstore.repositories.memory import (
    BookRecord,
    CategoryRecord,
    InMemoryStore,
    PurchaseRecord,
    ReviewRecord,
    UserRecord,
)
from bookstore.schemas.auth import User, UserType
from bookstore.schemas.book import Book, BookDetail
from bookstore.schemas.category import Category
from bookstore.schemas.common import Page, Pagination
from bookstore.schemas.purchase import Purchase, PurchaseBook, PurchaseUser
from bookstore.schemas.review import Review, ReviewBook, ReviewUser


def to_user(record: UserRecord) -> User:
    return User(
        id=record.id,
        email=record.email,
        full_name=record.full_name,
        user_type=UserType(id=record.user_type.id, name=record.user_type.name),
        is_active=record.is_active,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def to_category(record: CategoryRecord) -> Category:
    return Category(
        id=record.id,
        name=record.name,
        description=record.description,
        created_at=record.created_at,
    )


def rating_summary(store: InMemoryStore, book_id: str) -> tuple[float, int]:
    ratings = [review.rating for review in store.list_reviews(book_id=book_id)]
    if not ratings:
        return 0.0, 0
    return sum(ratings) / len(ratings), len(ratings)


def book_fields(store: InMemoryStore, record: BookRecord) -> dict:
    avg_rating, review_count = rating_summary(store, record.id)
    categories = [
        to_category(category)
        for category in (store.get_category(cid) for cid in record.category_ids)
        if category is not None
    ]
    return {
        "id": record.id,
        "title": record.title,
        "author": record.author,
        "description": record.description,
        "price": record.price,
        "is_free": record.is_free,
        "published_date": record.published_date,
        "cover_image": record.cover_image,
        "file_path": record.file_path,
        "created_at": record.created_at,
        "updated_at": record.updated_at,
        "categories": categories,
        "avg_rating": avg_rating,
        "review_count": review_count,
    }


def to_book(store: InMemoryStore, record: BookRecord) -> Book:
    return Book(**book_fields(store, record))


def to_book_detail(store: InMemoryStore, record: BookRecord) -> BookDetail:
    reviews = [to_review(store, review, include_book=False) for review in store.list_reviews(book_id=record.id)]
    return BookDetail(**book_fields(store, record), reviews=reviews)


def to_review(store: InMemoryStore, record: ReviewRecord, *, include_book: bool = True) -> Review:
    user = store.get_user(record.user_id)
    book = store.get_book(record.book_id) if include_book else None
    return Review(
        id=record.id,
        user_id=record.user_id,
        book_id=record.book_id,
        rating=record.rating,
        comment=record.comment,
        created_at=record.created_at,
        updated_at=record.updated_at,
        user=ReviewUser(id=user.id, full_name=user.full_name, email=user.email) if user else None,
        book=(
            ReviewBook(id=book.id, title=book.title, author=book.author, cover_image=book.cover_image)
            if book
            else None
        ),
    )


def to_purchase(store: InMemoryStore, record: PurchaseRecord, *, include_user: bool = False) -> Purchase:
    book = store.get_book(record.book_id)
    user = store.get_user(record.user_id) if include_user else None
    return Purchase(
        id=record.id,
        user_id=record.user_id,
        book_id=record.book_id,
        status=record.status,
        amount=record.amount,
        purchase_date=record.purchase_date,
        book=(
            PurchaseBook(
                id=book.id,
                title=book.title,
                author=book.author,
                cover_image=book.cover_image,
                price=book.price,
                is_free=book.is_free,
            )
            if book
            else None
        ),
        user=PurchaseUser(id=user.id, full_name=user.full_name, email=user.email) if user else None,
    )


def paginate(items: list, *, page: int, limit: int) -> tuple[list, Pagination]:
    page = max(page, 1)
    limit = max(limit, 1)
    start = (page - 1) * limit
    total = len(items)
    pagination = Pagination(total=total, page=page, limit=limit, pages=-(-total // limit))
    return items[start : start + limit], pagination


def to_page(items: list, pagination: Pagination) -> Page:
    return Page(data=items, pagination=pagination)
