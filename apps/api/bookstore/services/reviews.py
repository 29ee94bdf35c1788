"""Review service layer."""

from bookstore.errors import ApiError
from bookstore.repositories.memory import InMemoryStore, ReviewRecord
from bookstore.schemas.review import Review
from bookstore.services.views import to_review

_MIN_RATING = 1
_MAX_RATING = 5


def _ensure_rating(rating: int) -> None:
    if not _MIN_RATING <= rating <= _MAX_RATING:
        raise ApiError(status_code=400, code="INVALID_RATING", message="Rating must be between 1 and 5")


class ReviewService:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def list_book_reviews(self, *, book_id: str) -> list[Review]:
        if self._store.get_book(book_id) is None:
            raise ApiError(status_code=404, code="RESOURCE_NOT_FOUND", message="Book not found")
        return [to_review(self._store, record, include_book=False) for record in self._store.list_reviews(book_id=book_id)]

    def list_user_reviews(self, *, user_id: str) -> list[Review]:
        return [to_review(self._store, record) for record in self._store.list_reviews(user_id=user_id)]

    def get_review(self, *, review_id: str) -> Review:
        return to_review(self._store, self._require(review_id))

    def create_review(self, *, user_id: str, book_id: str, rating: int, comment: str | None = None) -> Review:
        _ensure_rating(rating)

        if self._store.get_book(book_id) is None:
            raise ApiError(status_code=404, code="RESOURCE_NOT_FOUND", message="Book not found")

        if self._store.find_review(user_id=user_id, book_id=book_id) is not None:
            raise ApiError(status_code=400, code="ALREADY_REVIEWED", message="You have already reviewed this book")

        if self._store.get_library_entry(user_id=user_id, book_id=book_id) is None:
            raise ApiError(
                status_code=400,
                code="LIBRARY_REQUIRED",
                message="You need to add this book to your library before reviewing it",
            )

        record = self._store.create_review(user_id=user_id, book_id=book_id, rating=rating, comment=comment)
        return to_review(self._store, record)

    def update_review(
        self,
        *,
        user_id: str,
        review_id: str,
        rating: int | None = None,
        comment: str | None = None,
    ) -> Review:
        record = self._require_own(review_id, user_id, action="update")

        changes: dict[str, object] = {}
        if rating is not None:
            _ensure_rating(rating)
            changes["rating"] = rating
        if comment is not None:
            changes["comment"] = comment

        return to_review(self._store, self._store.update_review(record, **changes))

    def delete_review(self, *, user_id: str, review_id: str) -> None:
        self._require_own(review_id, user_id, action="delete")
        self._store.delete_review(review_id)

    def _require(self, review_id: str) -> ReviewRecord:
        record = self._store.get_review(review_id)
        if record is None:
            raise ApiError(status_code=404, code="RESOURCE_NOT_FOUND", message="Review not found")
        return record

    def _require_own(self, review_id: str, user_id: str, *, action: str) -> ReviewRecord:
        record = self._require(review_id)
        if record.user_id != user_id:
            raise ApiError(status_code=403, code="FORBIDDEN", message=f"You can only {action} your own reviews")
        return record
