"""Category service layer."""

from bookstore.errors import ApiError
from bookstore.repositories.memory import CategoryRecord, InMemoryStore
from bookstore.schemas.book import Book
from bookstore.schemas.category import Category
from bookstore.schemas.common import Page
from bookstore.services.views import paginate, to_book, to_category, to_page


class CategoryService:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def list_categories(self) -> list[Category]:
        return [to_category(record) for record in self._store.list_categories()]

    def get_category(self, *, category_id: str) -> Category:
        return to_category(self._require(category_id))

    def list_books(self, *, category_id: str, page: int = 1, limit: int = 10) -> Page[Book]:
        self._require(category_id)
        books = [
            to_book(self._store, record)
            for record in self._store.list_books()
            if category_id in record.category_ids
        ]
        items, pagination = paginate(books, page=page, limit=limit)
        return to_page(items, pagination)

    def create_category(self, *, name: str, description: str | None = None) -> Category:
        self._ensure_unique_name(name)
        return to_category(self._store.create_category(name=name, description=description))

    def update_category(self, *, category_id: str, name: str | None = None, description: str | None = None) -> Category:
        record = self._require(category_id)
        changes: dict[str, object] = {}
        if name is not None:
            self._ensure_unique_name(name, exclude_id=category_id)
            changes["name"] = name
        if description is not None:
            changes["description"] = description
        return to_category(self._store.update_category(record, **changes))

    def delete_category(self, *, category_id: str) -> None:
        self._require(category_id)
        self._store.delete_category(category_id)

    def _require(self, category_id: str) -> CategoryRecord:
        record = self._store.get_category(category_id)
        if record is None:
            raise ApiError(status_code=404, code="RESOURCE_NOT_FOUND", message="Category not found")
        return record

    def _ensure_unique_name(self, name: str, exclude_id: str | None = None) -> None:
        existing = self._store.get_category_by_name(name)
        if existing is not None and existing.id != exclude_id:
            raise ApiError(status_code=400, code="CATEGORY_EXISTS", message="Category name already exists")
