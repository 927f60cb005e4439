"""Book schemas."""

from typing import Optional

from pydantic import BaseModel, Field


class Book(BaseModel):
    """A book record."""
    id: int = Field(description="Store-assigned book identifier")
    title: Optional[str] = Field(description="Book title")
    author: Optional[str] = Field(description="Book author")


class BookCreate(BaseModel):
    """Request to add a book. Both fields are checked by the store."""
    title: Optional[str] = Field(default=None, description="Book title")
    author: Optional[str] = Field(default=None, description="Book author")


class BookUpdate(BaseModel):
    """Request to replace a book's title and author."""
    title: Optional[str] = Field(default=None, description="New title")
    author: Optional[str] = Field(default=None, description="New author")


class MessageResponse(BaseModel):
    """Plain message, used for errors."""
    message: str


class BookDeletedResponse(BaseModel):
    """Response for a successful delete, carrying the removed book."""
    message: str = "Book deleted"
    book: Book
