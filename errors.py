class BookError(Exception):
    """Base class for errors reported by the book repository."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BookError):
    """The submitted book fields break a precondition."""


class NotFoundError(BookError):
    """No book has the requested id."""

    def __init__(self, book_id: str, message: str = "Book not found."):
        super().__init__(message)
        self.book_id = book_id
