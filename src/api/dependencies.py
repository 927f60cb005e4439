"""FastAPI dependencies shared by the routers."""

from fastapi import Request

from src.core.books.store import BookStore


def get_book_store(request: Request) -> BookStore:
    """Return the book store owned by the running application."""
    return request.app.state.book_store
