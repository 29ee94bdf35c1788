"""Per-user statistics."""

from bookstore.repositories.memory import InMemoryStore
from bookstore.schemas.admin import UserStats
from bookstore.schemas.purchase import OrderStatus


class UserService:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def user_stats(self, *, user_id: str) -> UserStats:
        purchases = self._store.list_purchases(user_id=user_id)
        return UserStats(
            library_count=len(self._store.list_library(user_id)),
            purchases_count=len(purchases),
            reviews_count=len(self._store.list_reviews(user_id=user_id)),
            total_spent=sum(p.amount for p in purchases if p.status is OrderStatus.COMPLETED),
        )
