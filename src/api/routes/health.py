"""Health check endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_book_store
from src.core.books.store import BookStore

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check(
    store: Annotated[BookStore, Depends(get_book_store)],
) -> dict:
    """Readiness check - verifies the book store is attached and serving."""
    return {
        "status": "ready",
        "books": store.count,
        "next_id": store.next_id,
    }


@router.get("/health/live")
async def liveness_check() -> dict:
    """Liveness check - verifies service is running."""
    return {"status": "alive"}
