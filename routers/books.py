import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status

import schemas
from repository import BookRepository

router = APIRouter(prefix="/books")
logger = logging.getLogger(__name__)


def get_repository(request: Request) -> BookRepository:
    return request.app.state.repository


def _as_flag(value: Optional[str]) -> Optional[bool]:
    # query flags are "1" for true; any other present value means false
    if value is None:
        return None
    return value == "1"


# Add Book
@router.post("", status_code=status.HTTP_201_CREATED)
async def add_book(
    book: schemas.BookPayload,
    repository: BookRepository = Depends(get_repository),
):
    book_id = repository.create(book)
    return {
        "status": "success",
        "message": "Book added successfully.",
        "data": {"bookId": book_id},
    }


# Get Books
@router.get("")
async def get_books(
    name: str | None = Query(default=None),
    reading: str | None = Query(default=None),
    finished: str | None = Query(default=None),
    repository: BookRepository = Depends(get_repository),
):
    logger.debug("Listing books name=%r reading=%r finished=%r", name, reading, finished)
    books = repository.list(
        name=name,
        reading=_as_flag(reading),
        finished=_as_flag(finished),
    )
    return {
        "status": "success",
        "data": {"books": [book.model_dump(by_alias=True) for book in books]},
    }


@router.get("/{book_id}")
async def get_book(
    book_id: str,
    repository: BookRepository = Depends(get_repository),
):
    book = repository.get(book_id)
    out = schemas.BookOut.model_validate(book)
    return {
        "status": "success",
        "data": {"book": out.model_dump(by_alias=True, mode="json")},
    }


@router.put("/{book_id}")
async def update_book(
    book_id: str,
    book: schemas.BookPayload,
    repository: BookRepository = Depends(get_repository),
):
    repository.update(book_id, book)
    return {"status": "success", "message": "Book updated successfully."}


@router.delete("/{book_id}")
async def delete_book(
    book_id: str,
    repository: BookRepository = Depends(get_repository),
):
    repository.delete(book_id)
    return {"status": "success", "message": "Book deleted successfully."}
