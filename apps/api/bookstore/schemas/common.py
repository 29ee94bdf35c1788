"""Shared response envelope and base models."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base for wire models; attributes are snake_case, JSON keys camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    data: T | None = None
    message: str


class Pagination(CamelModel):
    total: int
    page: int
    limit: int
    pages: int


class Page(CamelModel, Generic[T]):
    data: list[T]
    pagination: Pagination


def ok(data: T | None, message: str) -> ApiResponse[T]:
    return ApiResponse(data=data, message=message)
