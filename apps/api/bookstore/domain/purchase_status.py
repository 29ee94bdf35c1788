"""Purchase order status rules."""

from typing import Any

from bookstore.errors import ApiError
from bookstore.schemas.purchase import OrderStatus

# Statuses that block a second purchase of the same book.
ACTIVE_STATUSES: frozenset[OrderStatus] = frozenset({OrderStatus.PENDING, OrderStatus.COMPLETED})


def ensure_order_status(value: Any) -> bool:
    """Accept a known status string; anything else is a 400 ``Invalid status``."""
    try:
        OrderStatus(value)
    except (TypeError, ValueError) as exc:
        raise ApiError(status_code=400, code="INVALID_STATUS", message="Invalid status") from exc
    return True


def completes_order(old_status: OrderStatus, new_status: OrderStatus) -> bool:
    """True when a status change should grant library access."""
    return new_status is OrderStatus.COMPLETED and old_status is not OrderStatus.COMPLETED
