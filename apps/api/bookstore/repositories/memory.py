"""In-memory repositories used by the API and tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid4

from bookstore.domain.roles import USER_TYPE_IDS, UserRole
from bookstore.schemas.purchase import OrderStatus


def _now() -> datetime:
    return datetime.now(UTC)


def _new_id() -> str:
    return str(uuid4())


@dataclass(slots=True)
class UserTypeRecord:
    id: int
    name: str


@dataclass(slots=True)
class UserRecord:
    id: str
    email: str
    full_name: str
    password_hash: str
    user_type: UserTypeRecord
    created_at: datetime
    is_active: bool = True
    updated_at: datetime | None = None
    reset_token_hash: str | None = None
    reset_expiry: datetime | None = None


@dataclass(slots=True)
class CategoryRecord:
    id: str
    name: str
    description: str | None
    created_at: datetime
    updated_at: datetime | None = None


@dataclass(slots=True)
class BookRecord:
    id: str
    title: str
    author: str
    description: str
    price: float
    is_free: bool
    published_date: datetime
    created_at: datetime
    cover_image: str | None = None
    file_path: str | None = None
    updated_at: datetime | None = None
    category_ids: list[str] = field(default_factory=list)


@dataclass(slots=True)
class PurchaseRecord:
    id: str
    user_id: str
    book_id: str
    status: OrderStatus
    amount: float
    purchase_date: datetime
    updated_at: datetime | None = None


@dataclass(slots=True)
class LibraryEntryRecord:
    id: str
    user_id: str
    book_id: str
    added_date: datetime


@dataclass(slots=True)
class ReviewRecord:
    id: str
    user_id: str
    book_id: str
    rating: int
    comment: str | None
    created_at: datetime
    updated_at: datetime | None = None


@dataclass(slots=True)
class PasswordResetNotice:
    """Outbound reset mail handed to the delivery collaborator."""

    email: str
    full_name: str
    reset_url: str
    created_at: datetime


def _seed_user_types() -> dict[int, UserTypeRecord]:
    return {type_id: UserTypeRecord(id=type_id, name=role.value) for type_id, role in USER_TYPE_IDS.items()}


@dataclass(slots=True)
class InMemoryStore:
    """Simple, deterministic persistence layer for the catalog and tests."""

    user_types: dict[int, UserTypeRecord] = field(default_factory=_seed_user_types)
    users: dict[str, UserRecord] = field(default_factory=dict)
    categories: dict[str, CategoryRecord] = field(default_factory=dict)
    books: dict[str, BookRecord] = field(default_factory=dict)
    purchases: dict[str, PurchaseRecord] = field(default_factory=dict)
    library: dict[tuple[str, str], LibraryEntryRecord] = field(default_factory=dict)
    reviews: dict[str, ReviewRecord] = field(default_factory=dict)
    reset_notices: list[PasswordResetNotice] = field(default_factory=list)
    user_write_count: int = 0
    book_write_count: int = 0
    purchase_write_count: int = 0
    library_write_count: int = 0
    review_write_count: int = 0

    # users

    def get_user_type(self, type_id: int) -> UserTypeRecord | None:
        return self.user_types.get(type_id)

    def get_user(self, user_id: str) -> UserRecord | None:
        return self.users.get(user_id)

    def get_user_by_email(self, email: str) -> UserRecord | None:
        needle = email.strip().lower()
        for user in self.users.values():
            if user.email.lower() == needle:
                return user
        return None

    def create_user(self, *, email: str, full_name: str, password_hash: str, user_type: UserTypeRecord) -> UserRecord:
        user = UserRecord(
            id=_new_id(),
            email=email,
            full_name=full_name,
            password_hash=password_hash,
            user_type=user_type,
            created_at=_now(),
        )
        self.users[user.id] = user
        self.user_write_count += 1
        return user

    def list_users(self, *, role: UserRole | None = None) -> list[UserRecord]:
        users = [u for u in self.users.values() if role is None or u.user_type.name == role.value]
        return sorted(users, key=lambda u: u.created_at, reverse=True)

    def set_reset_token(self, user: UserRecord, *, token_hash: str, expires_at: datetime) -> UserRecord:
        user.reset_token_hash = token_hash
        user.reset_expiry = expires_at
        user.updated_at = _now()
        self.user_write_count += 1
        return user

    def set_password(self, user: UserRecord, *, password_hash: str) -> UserRecord:
        user.password_hash = password_hash
        user.reset_token_hash = None
        user.reset_expiry = None
        user.updated_at = _now()
        self.user_write_count += 1
        return user

    def record_reset_notice(self, notice: PasswordResetNotice) -> None:
        self.reset_notices.append(notice)

    # categories

    def get_category(self, category_id: str) -> CategoryRecord | None:
        return self.categories.get(category_id)

    def get_category_by_name(self, name: str) -> CategoryRecord | None:
        needle = name.strip().lower()
        for category in self.categories.values():
            if category.name.lower() == needle:
                return category
        return None

    def list_categories(self) -> list[CategoryRecord]:
        return sorted(self.categories.values(), key=lambda c: c.name.lower())

    def create_category(self, *, name: str, description: str | None) -> CategoryRecord:
        category = CategoryRecord(id=_new_id(), name=name, description=description, created_at=_now())
        self.categories[category.id] = category
        return category

    def update_category(self, category: CategoryRecord, **changes: object) -> CategoryRecord:
        for key, value in changes.items():
            setattr(category, key, value)
        category.updated_at = _now()
        return category

    def delete_category(self, category_id: str) -> None:
        self.categories.pop(category_id, None)
        for book in self.books.values():
            if category_id in book.category_ids:
                book.category_ids.remove(category_id)

    # books

    def get_book(self, book_id: str) -> BookRecord | None:
        return self.books.get(book_id)

    def list_books(self) -> list[BookRecord]:
        return sorted(self.books.values(), key=lambda b: b.created_at, reverse=True)

    def create_book(self, **values: object) -> BookRecord:
        book = BookRecord(id=_new_id(), created_at=_now(), **values)
        self.books[book.id] = book
        self.book_write_count += 1
        return book

    def update_book(self, book: BookRecord, **changes: object) -> BookRecord:
        for key, value in changes.items():
            setattr(book, key, value)
        book.updated_at = _now()
        self.book_write_count += 1
        return book

    def delete_book(self, book_id: str) -> None:
        self.books.pop(book_id, None)
        self.purchases = {k: p for k, p in self.purchases.items() if p.book_id != book_id}
        self.library = {k: e for k, e in self.library.items() if e.book_id != book_id}
        self.reviews = {k: r for k, r in self.reviews.items() if r.book_id != book_id}
        self.book_write_count += 1

    # purchases

    def get_purchase(self, purchase_id: str) -> PurchaseRecord | None:
        return self.purchases.get(purchase_id)

    def list_purchases(self, *, user_id: str | None = None, status: OrderStatus | None = None) -> list[PurchaseRecord]:
        purchases = [
            p
            for p in self.purchases.values()
            if (user_id is None or p.user_id == user_id) and (status is None or p.status is status)
        ]
        return sorted(purchases, key=lambda p: p.purchase_date, reverse=True)

    def create_purchase(self, *, user_id: str, book_id: str, status: OrderStatus, amount: float) -> PurchaseRecord:
        purchase = PurchaseRecord(
            id=_new_id(),
            user_id=user_id,
            book_id=book_id,
            status=status,
            amount=amount,
            purchase_date=_now(),
        )
        self.purchases[purchase.id] = purchase
        self.purchase_write_count += 1
        return purchase

    def set_purchase_status(self, purchase: PurchaseRecord, status: OrderStatus) -> PurchaseRecord:
        purchase.status = status
        purchase.updated_at = _now()
        self.purchase_write_count += 1
        return purchase

    # library

    def get_library_entry(self, *, user_id: str, book_id: str) -> LibraryEntryRecord | None:
        return self.library.get((user_id, book_id))

    def list_library(self, user_id: str) -> list[LibraryEntryRecord]:
        entries = [e for e in self.library.values() if e.user_id == user_id]
        return sorted(entries, key=lambda e: e.added_date, reverse=True)

    def add_library_entry(self, *, user_id: str, book_id: str) -> LibraryEntryRecord:
        entry = LibraryEntryRecord(id=_new_id(), user_id=user_id, book_id=book_id, added_date=_now())
        self.library[(user_id, book_id)] = entry
        self.library_write_count += 1
        return entry

    def remove_library_entry(self, *, user_id: str, book_id: str) -> None:
        self.library.pop((user_id, book_id), None)
        self.library_write_count += 1

    # reviews

    def get_review(self, review_id: str) -> ReviewRecord | None:
        return self.reviews.get(review_id)

    def find_review(self, *, user_id: str, book_id: str) -> ReviewRecord | None:
        for review in self.reviews.values():
            if review.user_id == user_id and review.book_id == book_id:
                return review
        return None

    def list_reviews(self, *, book_id: str | None = None, user_id: str | None = None) -> list[ReviewRecord]:
        reviews = [
            r
            for r in self.reviews.values()
            if (book_id is None or r.book_id == book_id) and (user_id is None or r.user_id == user_id)
        ]
        return sorted(reviews, key=lambda r: r.created_at, reverse=True)

    def create_review(self, *, user_id: str, book_id: str, rating: int, comment: str | None) -> ReviewRecord:
        review = ReviewRecord(
            id=_new_id(),
            user_id=user_id,
            book_id=book_id,
            rating=rating,
            comment=comment,
            created_at=_now(),
        )
        self.reviews[review.id] = review
        self.review_write_count += 1
        return review

    def update_review(self, review: ReviewRecord, **changes: object) -> ReviewRecord:
        for key, value in changes.items():
            setattr(review, key, value)
        review.updated_at = _now()
        self.review_write_count += 1
        return review

    def delete_review(self, review_id: str) -> None:
        self.reviews.pop(review_id, None)
        self.review_write_count += 1
