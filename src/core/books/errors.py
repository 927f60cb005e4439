"""Book store errors."""


class BookStoreError(Exception):
    """Base class for expected book store outcomes."""

    message: str = "Book store error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        self.message = message or self.message


class BookNotFoundError(BookStoreError):
    """No book exists with the requested id."""

    message = "Book not found"

    def __init__(self, book_id: int | None = None) -> None:
        super().__init__()
        self.book_id = book_id


class BookValidationError(BookStoreError):
    """A create request is missing its title or author."""

    message = "Title and author are required"
