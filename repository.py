"""
In-memory book repository.

``BookRepository`` owns an ordered collection of ``models.Book`` records
and implements the create/list/get/update/delete lifecycle on top of it.
Every public method runs under a single lock so mutations never interleave
and readers never see a half-applied change.

Id generation and the current time are injected (``id_factory`` and
``clock``) so tests can make both deterministic.
"""

import logging
import threading
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, List, Optional

import schemas
from errors import NotFoundError, ValidationError
from models import Book

logger = logging.getLogger(__name__)

_MAX_ID_ATTEMPTS = 10


def random_id_factory(length: int = 16) -> Callable[[], str]:
    def generate() -> str:
        return uuid.uuid4().hex[:length]
    return generate


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _validate(fields: schemas.BookPayload, action: str) -> None:
    # name is checked first so it wins when both rules are broken
    if not fields.name or not fields.name.strip():
        raise ValidationError(f"Failed to {action} book. Please provide a book name.")
    if fields.read_page > fields.page_count:
        raise ValidationError(
            f"Failed to {action} book. readPage cannot be greater than pageCount."
        )


class BookRepository:
    """Ordered, lock-guarded collection of books."""

    def __init__(
        self,
        id_factory: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._books: List[Book] = []
        self._lock = threading.Lock()
        self._id_factory = id_factory or random_id_factory()
        self._clock = clock or utc_now

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def _index_of(self, book_id: str) -> int:
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        return -1

    def _new_id(self) -> str:
        for _ in range(_MAX_ID_ATTEMPTS):
            book_id = self._id_factory()
            if self._index_of(book_id) == -1:
                return book_id
        raise RuntimeError("Could not generate an unused book id")

    def create(self, fields: schemas.BookPayload) -> str:
        """Validate ``fields``, append a new book and return its id."""
        with self._lock:
            try:
                _validate(fields, "add")
            except ValidationError as exc:
                logger.warning("Rejected new book: %s", exc.message)
                raise

            now = self._clock()
            book = Book(
                id=self._new_id(),
                name=fields.name,
                year=fields.year,
                author=fields.author,
                summary=fields.summary,
                publisher=fields.publisher,
                page_count=fields.page_count,
                read_page=fields.read_page,
                finished=fields.read_page == fields.page_count,
                reading=fields.reading,
                inserted_at=now,
                updated_at=now,
            )
            self._books.append(book)
            logger.info("Created book %s", book.id)
            return book.id

    def list(
        self,
        name: Optional[str] = None,
        reading: Optional[bool] = None,
        finished: Optional[bool] = None,
    ) -> List[schemas.BookSummary]:
        """Return ``{id, name, publisher}`` views in collection order.

        Only one filter is ever applied, always to the whole collection:
        ``name`` if given, otherwise ``reading``, otherwise ``finished``.
        The filters do not combine. See "Filter composition" in DESIGN.md
        for why ``name`` takes precedence.
        """
        with self._lock:
            books = self._books
            if name:
                needle = name.lower()
                books = [book for book in self._books if needle in book.name.lower()]
            elif reading is not None:
                books = [book for book in self._books if book.reading == reading]
            elif finished is not None:
                books = [book for book in self._books if book.finished == finished]

            return [schemas.BookSummary.model_validate(book) for book in books]

    def get(self, book_id: str) -> Book:
        with self._lock:
            index = self._index_of(book_id)
            if index == -1:
                raise NotFoundError(book_id)
            return replace(self._books[index])

    def update(self, book_id: str, fields: schemas.BookPayload) -> None:
        """Replace every field of a book except its id and ``inserted_at``.

        The payload is validated before the id is looked up, so a bad
        payload for an unknown id is a ``ValidationError``.
        """
        with self._lock:
            try:
                _validate(fields, "update")
            except ValidationError as exc:
                logger.warning("Rejected update of book %s: %s", book_id, exc.message)
                raise

            index = self._index_of(book_id)
            if index == -1:
                raise NotFoundError(book_id)

            current = self._books[index]
            self._books[index] = replace(
                current,
                name=fields.name,
                year=fields.year,
                author=fields.author,
                summary=fields.summary,
                publisher=fields.publisher,
                page_count=fields.page_count,
                read_page=fields.read_page,
                finished=fields.read_page == fields.page_count,
                reading=fields.reading,
                updated_at=max(self._clock(), current.inserted_at),
            )
            logger.info("Updated book %s", book_id)

    def delete(self, book_id: str) -> None:
        with self._lock:
            index = self._index_of(book_id)
            if index == -1:
                raise NotFoundError(book_id)
            del self._books[index]
            logger.info("Deleted book %s", book_id)
