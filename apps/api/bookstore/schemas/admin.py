"""Admin dashboard and user statistics schemas."""

from datetime import datetime

from bookstore.schemas.common import CamelModel
from bookstore.schemas.purchase import OrderStatus


class DashboardCounts(CamelModel):
    users: int
    books: int
    free_books: int
    paid_books: int
    categories: int
    purchases: int
    pending_purchases: int
    completed_purchases: int
    cancelled_purchases: int
    library_entries: int
    reviews: int


class RatingSummary(CamelModel):
    average: float
    count: int


class RecentUser(CamelModel):
    id: str
    email: str
    full_name: str
    created_at: datetime


class RecentBook(CamelModel):
    id: str
    title: str
    author: str
    cover_image: str | None = None
    price: float
    is_free: bool
    created_at: datetime
    published_date: datetime


class RecentPurchase(CamelModel):
    id: str
    purchase_date: datetime
    status: OrderStatus
    book_id: str
    book_title: str
    price: float
    user_full_name: str


class RecentActivity(CamelModel):
    users: list[RecentUser]
    books: list[RecentBook]
    purchases: list[RecentPurchase]


class DashboardStats(CamelModel):
    counts: DashboardCounts
    rating: RatingSummary
    recent: RecentActivity
    revenue: float


class UserStats(CamelModel):
    library_count: int
    purchases_count: int
    reviews_count: int
    total_spent: float
