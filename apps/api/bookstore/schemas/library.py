"""Library API schemas."""

from datetime import datetime

from bookstore.schemas.common import CamelModel


class LibraryEntry(CamelModel):
    id: str
    user_id: str
    book_id: str
    added_date: datetime


class AddToLibraryRequest(CamelModel):
    book_id: str
