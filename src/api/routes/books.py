"""Book CRUD endpoints."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_book_store
from src.api.schemas.books import (
    Book,
    BookCreate,
    BookDeletedResponse,
    BookUpdate,
    MessageResponse,
)
from src.core.books.ids import parse_book_id
from src.core.books.store import BookStore

router = APIRouter(prefix="/books", tags=["Books"])

NOT_FOUND = {404: {"model": MessageResponse, "description": "Book not found"}}


@router.get("", response_model=list[Book])
async def list_books(
    store: Annotated[BookStore, Depends(get_book_store)],
) -> list[Book]:
    """List all books in insertion order."""
    return store.list_books()


@router.get("/{book_id}", response_model=Book, responses=NOT_FOUND)
async def get_book(
    book_id: str,
    store: Annotated[BookStore, Depends(get_book_store)],
) -> Book:
    """Get a single book."""
    return store.get_book(parse_book_id(book_id))


@router.post(
    "",
    response_model=Book,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": MessageResponse, "description": "Title and author are required"}},
)
async def create_book(
    store: Annotated[BookStore, Depends(get_book_store)],
    request: Optional[BookCreate] = None,
) -> Book:
    """
    Add a book.

    The id is assigned by the service. Both title and author must be
    non-empty.
    """
    request = request or BookCreate()
    return store.create_book(request.title, request.author)


@router.put("/{book_id}", response_model=Book, responses=NOT_FOUND)
async def update_book(
    book_id: str,
    store: Annotated[BookStore, Depends(get_book_store)],
    request: Optional[BookUpdate] = None,
) -> Book:
    """
    Replace a book's title and author.

    Fields left out of the body are cleared; they are not validated the
    way they are on create.
    """
    request = request or BookUpdate()
    return store.update_book(parse_book_id(book_id), request.title, request.author)


@router.delete("/{book_id}", response_model=BookDeletedResponse, responses=NOT_FOUND)
async def delete_book(
    book_id: str,
    store: Annotated[BookStore, Depends(get_book_store)],
) -> BookDeletedResponse:
    """Delete a book and return the removed record."""
    book = store.delete_book(parse_book_id(book_id))
    return BookDeletedResponse(book=book)
