"""Admin dashboard service layer."""

from __future__ import annotations

from bookstore.domain.roles import UserRole
from bookstore.repositories.memory import InMemoryStore
from bookstore.schemas.admin import (
    DashboardCounts,
    DashboardStats,
    RatingSummary,
    RecentActivity,
    RecentBook,
    RecentPurchase,
    RecentUser,
)
from bookstore.schemas.auth import User
from bookstore.schemas.common import Page
from bookstore.schemas.purchase import OrderStatus, Purchase
from bookstore.services.views import paginate, to_page, to_purchase, to_user

_RECENT_LIMIT = 5


class AdminService:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def list_users(self, *, search: str | None = None, page: int = 1, limit: int = 10) -> Page[User]:
        users = self._store.list_users(role=UserRole.USER)
        if search:
            needle = search.lower()
            users = [u for u in users if needle in u.email.lower() or needle in u.full_name.lower()]
        items, pagination = paginate(users, page=page, limit=limit)
        return to_page([to_user(u) for u in items], pagination)

    def list_purchases(self, *, status: OrderStatus | None = None, page: int = 1, limit: int = 10) -> Page[Purchase]:
        purchases = self._store.list_purchases(status=status)
        items, pagination = paginate(purchases, page=page, limit=limit)
        return to_page([to_purchase(self._store, p, include_user=True) for p in items], pagination)

    def dashboard_stats(self) -> DashboardStats:
        users = self._store.list_users(role=UserRole.USER)
        books = self._store.list_books()
        purchases = self._store.list_purchases()
        reviews = self._store.list_reviews()

        free_books = sum(1 for b in books if b.is_free)
        by_status = {status: sum(1 for p in purchases if p.status is status) for status in OrderStatus}
        ratings = [r.rating for r in reviews]

        counts = DashboardCounts(
            users=len(users),
            books=len(books),
            free_books=free_books,
            paid_books=len(books) - free_books,
            categories=len(self._store.categories),
            purchases=len(purchases),
            pending_purchases=by_status[OrderStatus.PENDING],
            completed_purchases=by_status[OrderStatus.COMPLETED],
            cancelled_purchases=by_status[OrderStatus.CANCELLED],
            library_entries=len(self._store.library),
            reviews=len(reviews),
        )
        return DashboardStats(
            counts=counts,
            rating=RatingSummary(average=sum(ratings) / len(ratings) if ratings else 0, count=len(ratings)),
            recent=RecentActivity(
                users=[
                    RecentUser(id=u.id, email=u.email, full_name=u.full_name, created_at=u.created_at)
                    for u in users[:_RECENT_LIMIT]
                ],
                books=[
                    RecentBook(
                        id=b.id,
                        title=b.title,
                        author=b.author,
                        cover_image=b.cover_image,
                        price=b.price,
                        is_free=b.is_free,
                        created_at=b.created_at,
                        published_date=b.published_date,
                    )
                    for b in books[:_RECENT_LIMIT]
                ],
                purchases=[self._recent_purchase(p) for p in purchases[:_RECENT_LIMIT]],
            ),
            revenue=sum(p.amount for p in purchases if p.status is OrderStatus.COMPLETED),
        )

    def _recent_purchase(self, record) -> RecentPurchase:
        book = self._store.get_book(record.book_id)
        user = self._store.get_user(record.user_id)
        return RecentPurchase(
            id=record.id,
            purchase_date=record.purchase_date,
            status=record.status,
            book_id=record.book_id,
            book_title=book.title if book else "",
            price=book.price if book else 0,
            user_full_name=user.full_name if user else "",
        )
