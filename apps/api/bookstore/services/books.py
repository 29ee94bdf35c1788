"""Book catalog service layer."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from bookstore.errors import ApiError
from bookstore.repositories.memory import BookRecord, InMemoryStore
from bookstore.schemas.book import Book, BookDetail, BookQuery
from bookstore.schemas.common import Page
from bookstore.services.views import paginate, to_book, to_book_detail, to_page

_SORTABLE_FIELDS: dict[str, str] = {
    "title": "title",
    "author": "author",
    "price": "price",
    "createdAt": "created_at",
    "publishedDate": "published_date",
}


def _aware(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


class BookService:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def list_books(self, query: BookQuery) -> Page[Book]:
        records = self._store.list_books()

        if query.is_free is not None:
            records = [r for r in records if r.is_free is query.is_free]

        if query.search:
            needle = query.search.lower()
            records = [r for r in records if needle in r.title.lower() or needle in r.author.lower()]

        if query.category:
            needle = query.category.lower()
            records = [r for r in records if any(needle in name.lower() for name in self._category_names(r))]

        records = self._sorted(records, query.sort)
        items, pagination = paginate(records, page=query.page, limit=query.limit)
        return to_page([to_book(self._store, r) for r in items], pagination)

    def get_book(self, *, book_id: str) -> BookDetail:
        return to_book_detail(self._store, self._require(book_id))

    def create_book(
        self,
        *,
        title: str,
        author: str,
        description: str,
        price: float,
        is_free: bool,
        published_date: datetime,
        categories: list[str],
        cover_image: str | None = None,
        file_path: str | None = None,
    ) -> Book:
        self._ensure_categories_exist(categories)
        record = self._store.create_book(
            title=title,
            author=author,
            description=description,
            price=price,
            is_free=is_free,
            published_date=_aware(published_date),
            cover_image=cover_image,
            file_path=file_path,
            category_ids=list(dict.fromkeys(categories)),
        )
        return to_book(self._store, record)

    def update_book(self, *, book_id: str, changes: dict[str, Any]) -> Book:
        record = self._require(book_id)
        updates = {key: value for key, value in changes.items() if value is not None}

        if "published_date" in updates:
            updates["published_date"] = _aware(updates["published_date"])

        categories = updates.pop("categories", None)
        if categories:
            self._ensure_categories_exist(categories)
            updates["category_ids"] = list(dict.fromkeys(categories))

        return to_book(self._store, self._store.update_book(record, **updates))

    def delete_book(self, *, book_id: str) -> None:
        self._require(book_id)
        self._store.delete_book(book_id)

    def _require(self, book_id: str) -> BookRecord:
        record = self._store.get_book(book_id)
        if record is None:
            raise ApiError(status_code=404, code="RESOURCE_NOT_FOUND", message="Book not found")
        return record

    def _ensure_categories_exist(self, category_ids: list[str]) -> None:
        if any(self._store.get_category(cid) is None for cid in category_ids):
            raise ApiError(status_code=400, code="UNKNOWN_CATEGORY", message="One or more categories not found")

    def _category_names(self, record: BookRecord) -> list[str]:
        return [c.name for c in (self._store.get_category(cid) for cid in record.category_ids) if c is not None]

    @staticmethod
    def _sorted(records: list[BookRecord], sort: str | None) -> list[BookRecord]:
        """Apply a ``field:direction`` sort; unknown fields keep newest-first order."""
        if not sort:
            return records
        field, _, direction = sort.partition(":")
        attribute = _SORTABLE_FIELDS.get(field)
        if attribute is None or direction.lower() not in ("asc", "desc"):
            return records
        return sorted(records, key=lambda r: getattr(r, attribute), reverse=direction.lower() == "desc")
