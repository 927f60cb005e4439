"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import CollectorRegistry
from prometheus_fastapi_instrumentator import Instrumentator

from src.api.routes import books_router, health_router
from src.config import Settings, get_settings
from src.core.books.errors import BookNotFoundError, BookValidationError
from src.core.books.store import BookStore
from src.utils.logging import setup_logging

VERSION = "1.0.0"

logger = structlog.get_logger(__name__)


async def book_not_found_handler(request: Request, exc: BookNotFoundError) -> JSONResponse:
    """Map a missing book to 404."""
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": exc.message})


async def book_validation_handler(request: Request, exc: BookValidationError) -> JSONResponse:
    """Map an incomplete create payload to 400."""
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject bodies that are not JSON or carry fields of the wrong type."""
    logger.info("Invalid request body", path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request body"},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and answer with a generic 500."""
    logger.error("Unhandled exception", path=request.url.path, error=str(exc), exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def create_app(settings: Optional[Settings] = None, store: Optional[BookStore] = None) -> FastAPI:
    """
    Build the application around its own book store.

    A store may be passed in; otherwise one is created, seeded unless
    ``seed_books`` is turned off.
    """
    settings = settings or get_settings()
    if store is None:
        store = BookStore.seeded() if settings.seed_books else BookStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup and shutdown."""
        setup_logging(settings.log_level, settings.log_format, debug=settings.debug)
        logger.info(
            "Book library API listening",
            host=settings.host,
            port=settings.port,
            books=app.state.book_store.count,
        )
        yield
        logger.info("Book library API stopped")

    app = FastAPI(
        title=settings.app_name,
        description="In-memory book library with create, read, update and delete endpoints",
        version=VERSION,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.book_store = store
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Prometheus metrics, one registry per application
    if settings.metrics_enabled:
        Instrumentator(registry=CollectorRegistry()).instrument(app).expose(app, endpoint="/metrics")

    app.add_exception_handler(BookNotFoundError, book_not_found_handler)
    app.add_exception_handler(BookValidationError, book_validation_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(health_router)
    app.include_router(books_router)

    @app.get("/")
    async def root():
        """API information endpoint."""
        return {
            "service": settings.app_name,
            "version": VERSION,
            "docs": "/docs",
            "health": "/health",
            "books": "/books",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=settings.workers,
    )
