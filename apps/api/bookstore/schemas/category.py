"""Category API schemas."""

from datetime import datetime

from bookstore.schemas.common import CamelModel


class Category(CamelModel):
    id: str
    name: str
    description: str | None = None
    created_at: datetime


class CreateCategoryRequest(CamelModel):
    name: str
    description: str | None = None


class UpdateCategoryRequest(CamelModel):
    name: str | None = None
    description: str | None = None
