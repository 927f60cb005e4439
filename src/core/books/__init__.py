"""Book management module."""

from src.core.books.errors import BookNotFoundError, BookStoreError, BookValidationError
from src.core.books.ids import parse_book_id
from src.core.books.store import SEED_BOOKS, BookStore

__all__ = [
    "BookStore",
    "SEED_BOOKS",
    "BookStoreError",
    "BookNotFoundError",
    "BookValidationError",
    "parse_book_id",
]
