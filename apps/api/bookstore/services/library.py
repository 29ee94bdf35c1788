"""Personal library service layer."""

from bookstore.errors import ApiError
from bookstore.repositories.memory import InMemoryStore
from bookstore.schemas.book import LibraryBook
from bookstore.schemas.library import LibraryEntry
from bookstore.schemas.purchase import OrderStatus
from bookstore.services.views import book_fields


class LibraryService:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def list_library(self, *, user_id: str) -> list[LibraryBook]:
        books: list[LibraryBook] = []
        for entry in self._store.list_library(user_id):
            record = self._store.get_book(entry.book_id)
            if record is None:
                continue
            books.append(LibraryBook(**book_fields(self._store, record), added_to_library_at=entry.added_date))
        return books

    def add_book(self, *, user_id: str, book_id: str) -> LibraryEntry:
        book = self._store.get_book(book_id)
        if book is None:
            raise ApiError(status_code=404, code="RESOURCE_NOT_FOUND", message="Book not found")

        if self._store.get_library_entry(user_id=user_id, book_id=book_id) is not None:
            raise ApiError(status_code=400, code="ALREADY_IN_LIBRARY", message="This book is already in your library")

        if not book.is_free:
            purchased = any(
                p.book_id == book_id for p in self._store.list_purchases(user_id=user_id, status=OrderStatus.COMPLETED)
            )
            if not purchased:
                raise ApiError(status_code=400, code="PURCHASE_REQUIRED", message="You need to purchase this book first")

        entry = self._store.add_library_entry(user_id=user_id, book_id=book_id)
        return LibraryEntry(id=entry.id, user_id=entry.user_id, book_id=entry.book_id, added_date=entry.added_date)

    def remove_book(self, *, user_id: str, book_id: str) -> None:
        if self._store.get_library_entry(user_id=user_id, book_id=book_id) is None:
            raise ApiError(status_code=404, code="RESOURCE_NOT_FOUND", message="This book is not in your library")
        self._store.remove_library_entry(user_id=user_id, book_id=book_id)
