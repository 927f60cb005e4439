"""API schemas."""

from src.api.schemas.books import (
    Book,
    BookCreate,
    BookDeletedResponse,
    BookUpdate,
    MessageResponse,
)

__all__ = ["Book", "BookCreate", "BookDeletedResponse", "BookUpdate", "MessageResponse"]
