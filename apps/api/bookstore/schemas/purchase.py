"""Purchase API schemas."""

from datetime import datetime
from enum import Enum

from bookstore.schemas.common import CamelModel


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class PurchaseBook(CamelModel):
    id: str
    title: str
    author: str
    cover_image: str | None = None
    price: float
    is_free: bool


class PurchaseUser(CamelModel):
    id: str
    full_name: str
    email: str


class Purchase(CamelModel):
    id: str
    user_id: str
    book_id: str
    status: OrderStatus
    amount: float
    purchase_date: datetime
    book: PurchaseBook | None = None
    user: PurchaseUser | None = None


class CreatePurchaseRequest(CamelModel):
    book_id: str


class UpdatePurchaseStatusRequest(CamelModel):
    status: OrderStatus
