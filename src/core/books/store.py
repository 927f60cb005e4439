"""In-memory book storage."""

import threading
from typing import Iterable, Optional

import structlog

from src.api.schemas.books import Book
from src.core.books.errors import BookNotFoundError, BookValidationError

logger = structlog.get_logger(__name__)

SEED_BOOKS: tuple[Book, ...] = (
    Book(id=1, title="The Lord of the Rings", author="J.R.R. Tolkien"),
    Book(id=2, title="Pride and Prejudice", author="Jane Austen"),
)


class BookStore:
    """Ordered in-memory store for books with a monotonic id counter.

    Books keep insertion order. Ids are assigned by the store, strictly
    increase, and are never handed out again once deleted. Every method
    takes the store lock, so one instance may be shared across threads.
    Books returned to callers are copies.
    """

    def __init__(self, books: Iterable[Book] = ()) -> None:
        self._lock = threading.Lock()
        self._books: list[Book] = [book.model_copy() for book in books]
        ids = [book.id for book in self._books]
        if len(ids) != len(set(ids)):
            raise ValueError("Seed books must have unique ids")
        self._next_id: int = max(ids, default=0) + 1

    @classmethod
    def seeded(cls) -> "BookStore":
        """Create a store holding the default seed books."""
        return cls(SEED_BOOKS)

    @property
    def next_id(self) -> int:
        """Id the next created book will receive."""
        with self._lock:
            return self._next_id

    @property
    def count(self) -> int:
        """Number of books currently held."""
        with self._lock:
            return len(self._books)

    def _index_of(self, book_id: Optional[int]) -> int:
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        raise BookNotFoundError(book_id)

    def list_books(self) -> list[Book]:
        """List all books in insertion order."""
        with self._lock:
            return [book.model_copy() for book in self._books]

    def get_book(self, book_id: Optional[int]) -> Book:
        """Get a book by id."""
        with self._lock:
            return self._books[self._index_of(book_id)].model_copy()

    def create_book(self, title: Optional[str], author: Optional[str]) -> Book:
        """Add a new book and return it with its assigned id."""
        if not title or not author:
            logger.info("Book rejected", reason="missing title or author")
            raise BookValidationError()

        with self._lock:
            book = Book(id=self._next_id, title=title, author=author)
            self._next_id += 1
            self._books.append(book)
            created = book.model_copy()

        logger.info("Book created", book_id=created.id, title=created.title)
        return created

    def update_book(
        self, book_id: Optional[int], title: Optional[str], author: Optional[str]
    ) -> Book:
        """Replace a book's title and author.

        Unlike ``create_book``, empty or missing values are stored as given.
        """
        with self._lock:
            book = self._books[self._index_of(book_id)]
            book.title = title
            book.author = author
            updated = book.model_copy()

        logger.info("Book updated", book_id=updated.id)
        return updated

    def delete_book(self, book_id: Optional[int]) -> Book:
        """Remove a book and return the removed record."""
        with self._lock:
            removed = self._books.pop(self._index_of(book_id))

        logger.info("Book deleted", book_id=removed.id)
        return removed
