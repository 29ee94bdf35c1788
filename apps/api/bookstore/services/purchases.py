"""Purchase service layer."""

from __future__ import annotations

import logging

from bookstore.core.logging_safety import safe_log_identifier
from bookstore.domain.purchase_status import ACTIVE_STATUSES, completes_order
from bookstore.errors import ApiError
from bookstore.repositories.memory import InMemoryStore, PurchaseRecord
from bookstore.schemas.purchase import OrderStatus, Purchase
from bookstore.services.views import to_purchase

logger = logging.getLogger(__name__)


class PurchaseService:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def list_purchases(self, *, user_id: str) -> list[Purchase]:
        return [to_purchase(self._store, record) for record in self._store.list_purchases(user_id=user_id)]

    def get_purchase(self, *, user_id: str, purchase_id: str) -> Purchase:
        record = self._require(purchase_id)
        if record.user_id != user_id:
            raise ApiError(
                status_code=403,
                code="FORBIDDEN",
                message="You do not have permission to view this purchase",
            )
        return to_purchase(self._store, record)

    def create_purchase(self, *, user_id: str, book_id: str) -> Purchase:
        book = self._store.get_book(book_id)
        if book is None:
            raise ApiError(status_code=404, code="RESOURCE_NOT_FOUND", message="Book not found")

        already_owned = any(
            p.book_id == book_id and p.status in ACTIVE_STATUSES
            for p in self._store.list_purchases(user_id=user_id)
        )
        if already_owned:
            raise ApiError(status_code=400, code="ALREADY_PURCHASED", message="You have already purchased this book")

        status = OrderStatus.COMPLETED if book.is_free else OrderStatus.PENDING
        record = self._store.create_purchase(
            user_id=user_id,
            book_id=book_id,
            status=status,
            amount=0.0 if book.is_free else book.price,
        )
        if book.is_free:
            self._grant_library_access(record)

        logger.info(
            "purchase.created purchase_id=%s user_id=%s status=%s",
            record.id,
            safe_log_identifier(user_id, prefix="uid"),
            status.value,
        )
        return to_purchase(self._store, record)

    def update_status(self, *, purchase_id: str, status: OrderStatus) -> Purchase:
        record = self._require(purchase_id)
        previous = record.status
        self._store.set_purchase_status(record, status)
        if completes_order(previous, status):
            self._grant_library_access(record)

        logger.info(
            "purchase.status_changed purchase_id=%s prev_status=%s new_status=%s",
            record.id,
            previous.value,
            status.value,
        )
        return to_purchase(self._store, record, include_user=True)

    def _require(self, purchase_id: str) -> PurchaseRecord:
        record = self._store.get_purchase(purchase_id)
        if record is None:
            raise ApiError(status_code=404, code="RESOURCE_NOT_FOUND", message="Purchase not found")
        return record

    def _grant_library_access(self, record: PurchaseRecord) -> None:
        if self._store.get_library_entry(user_id=record.user_id, book_id=record.book_id) is None:
            self._store.add_library_entry(user_id=record.user_id, book_id=record.book_id)
