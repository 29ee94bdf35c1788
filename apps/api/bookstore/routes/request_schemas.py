"""Validation schemas applied to incoming requests, one per endpoint payload."""

from bookstore.domain.purchase_status import ensure_order_status
from bookstore.validation import ArrayField, CustomField, FieldType, PrimitiveField

_SORT_DIRECTIONS = ("asc", "desc")


def _is_sort_expression(value: str) -> bool:
    field, sep, direction = value.partition(":")
    return bool(field) and bool(sep) and direction.lower() in _SORT_DIRECTIONS


def _is_positive(value: int) -> bool:
    return value >= 1


ID_PARAMS = (PrimitiveField(field="id", type=FieldType.STRING),)

BOOK_ID_PARAMS = (PrimitiveField(field="bookId", type=FieldType.STRING),)

LOGIN = (
    PrimitiveField(field="email", type=FieldType.EMAIL),
    PrimitiveField(field="password", type=FieldType.PASSWORD),
)

REGISTER = (
    PrimitiveField(field="fullName", type=FieldType.PURE_NAME),
    PrimitiveField(field="email", type=FieldType.EMAIL),
    PrimitiveField(field="password", type=FieldType.PASSWORD),
    PrimitiveField(field="userType", type=FieldType.INTEGER),
)

FORGOT_PASSWORD = (PrimitiveField(field="email", type=FieldType.EMAIL),)

RESET_PASSWORD = (
    PrimitiveField(field="password", type=FieldType.PASSWORD),
    PrimitiveField(field="confirmPassword", type=FieldType.PASSWORD),
    PrimitiveField(field="token", type=FieldType.STRING),
    PrimitiveField(field="email", type=FieldType.EMAIL),
)

CREATE_BOOK = (
    PrimitiveField(field="title", type=FieldType.STRING),
    PrimitiveField(field="author", type=FieldType.STRING),
    PrimitiveField(field="description", type=FieldType.STRING),
    PrimitiveField(field="price", type=FieldType.NUMBER),
    PrimitiveField(field="isFree", type=FieldType.BOOLEAN),
    PrimitiveField(field="publishedDate", type=FieldType.DATETIME),
    ArrayField(field="categories", items=FieldType.STRING),
    PrimitiveField(field="coverImage", type=FieldType.STRING, required=False),
    PrimitiveField(field="filePath", type=FieldType.STRING, required=False),
)

UPDATE_BOOK = (
    PrimitiveField(field="title", type=FieldType.STRING, required=False),
    PrimitiveField(field="author", type=FieldType.STRING, required=False),
    PrimitiveField(field="description", type=FieldType.STRING, required=False),
    PrimitiveField(field="price", type=FieldType.NUMBER, required=False),
    PrimitiveField(field="isFree", type=FieldType.BOOLEAN, required=False),
    PrimitiveField(field="publishedDate", type=FieldType.DATETIME, required=False),
    ArrayField(field="categories", items=FieldType.STRING, required=False),
    PrimitiveField(field="coverImage", type=FieldType.STRING, required=False),
    PrimitiveField(field="filePath", type=FieldType.STRING, required=False),
)

BOOK_LIST_QUERY = (
    PrimitiveField(field="category", type=FieldType.STRING, required=False),
    PrimitiveField(field="isFree", type=FieldType.BOOLEAN, required=False),
    PrimitiveField(field="search", type=FieldType.STRING, required=False),
    PrimitiveField(
        field="sort",
        type=FieldType.STRING,
        required=False,
        validate=_is_sort_expression,
        message="Provide sort as field:asc or field:desc",
    ),
    PrimitiveField(field="limit", type=FieldType.INTEGER, required=False, validate=_is_positive),
    PrimitiveField(field="page", type=FieldType.INTEGER, required=False, validate=_is_positive),
)

PAGINATION_QUERY = (
    PrimitiveField(field="limit", type=FieldType.INTEGER, required=False, validate=_is_positive),
    PrimitiveField(field="page", type=FieldType.INTEGER, required=False, validate=_is_positive),
)

ADMIN_USERS_QUERY = (
    PrimitiveField(field="search", type=FieldType.STRING, required=False),
    *PAGINATION_QUERY,
)

ADMIN_PURCHASES_QUERY = (
    CustomField(field="status", format=ensure_order_status, required=False),
    *PAGINATION_QUERY,
)

CREATE_CATEGORY = (
    PrimitiveField(field="name", type=FieldType.STRING),
    PrimitiveField(field="description", type=FieldType.STRING, required=False),
)

UPDATE_CATEGORY = (
    PrimitiveField(field="name", type=FieldType.STRING, required=False),
    PrimitiveField(field="description", type=FieldType.STRING, required=False),
)

CREATE_PURCHASE = (PrimitiveField(field="bookId", type=FieldType.STRING),)

UPDATE_PURCHASE_STATUS = (CustomField(field="status", format=ensure_order_status),)

ADD_TO_LIBRARY = (PrimitiveField(field="bookId", type=FieldType.STRING),)

CREATE_REVIEW = (
    PrimitiveField(field="bookId", type=FieldType.STRING),
    PrimitiveField(field="rating", type=FieldType.INTEGER),
    PrimitiveField(field="comment", type=FieldType.STRING, required=False),
)

UPDATE_REVIEW = (
    PrimitiveField(field="rating", type=FieldType.INTEGER, required=False),
    PrimitiveField(field="comment", type=FieldType.STRING, required=False),
)
