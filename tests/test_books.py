"""Tests for book endpoints."""

import pytest
from fastapi.testclient import TestClient

from src.config import Settings
from src.core.books.store import BookStore
from src.main import create_app

TOLKIEN = {"id": 1, "title": "The Lord of the Rings", "author": "J.R.R. Tolkien"}
AUSTEN = {"id": 2, "title": "Pride and Prejudice", "author": "Jane Austen"}
UPDATE = {"title": "New Title", "author": "New Author"}


def test_list_books(client):
    """Test listing returns the seed books in order."""
    response = client.get("/books")
    assert response.status_code == 200
    assert response.json() == [TOLKIEN, AUSTEN]


def test_get_book(client):
    response = client.get("/books/1")
    assert response.status_code == 200
    assert response.json() == TOLKIEN


def test_get_book_not_found(client):
    response = client.get("/books/999")
    assert response.status_code == 404
    assert response.json() == {"message": "Book not found"}


@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
@pytest.mark.parametrize("raw_id", ["abc", "NaN", "-1", "0", "9" * 5000])
def test_unparseable_or_unknown_id(client, method, raw_id):
    """Ids that name no book are a plain 404, never a validation error."""
    response = client.request(method, f"/books/{raw_id}", json=UPDATE)
    assert response.status_code == 404
    assert response.json() == {"message": "Book not found"}


@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
@pytest.mark.parametrize("raw_id", ["1abc", "1.9", "01"])
def test_lenient_id(client, method, raw_id):
    """Trailing characters after the leading digits are ignored."""
    response = client.request(method, f"/books/{raw_id}", json=UPDATE)
    assert response.status_code == 200
    book = response.json()["book"] if method == "DELETE" else response.json()
    assert book["id"] == 1
    if method != "GET":
        assert client.get("/books").json()[0] != TOLKIEN


def test_create_book(client, new_book):
    """Test creating a book assigns the next id."""
    response = client.post("/books", json=new_book)
    assert response.status_code == 201
    assert response.json() == {"id": 3, **new_book}

    assert client.get("/books/3").json() == {"id": 3, **new_book}


def test_create_book_ignores_client_id(client, new_book):
    response = client.post("/books", json={"id": 42, **new_book})
    assert response.status_code == 201
    assert response.json()["id"] == 3
    assert client.get("/books/42").status_code == 404


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"title": "Dune"},
        {"author": "Frank Herbert"},
        {"title": "", "author": "Frank Herbert"},
        {"title": "Dune", "author": ""},
        {"title": None, "author": "Frank Herbert"},
    ],
)
def test_create_book_missing_fields(client, payload):
    """Test creating a book without title or author is rejected."""
    response = client.post("/books", json=payload)
    assert response.status_code == 400
    assert response.json() == {"message": "Title and author are required"}
    assert client.get("/books").json() == [TOLKIEN, AUSTEN]


def test_create_book_without_body(client):
    response = client.post("/books")
    assert response.status_code == 400
    assert response.json() == {"message": "Title and author are required"}


def test_create_book_malformed_json(client):
    response = client.post(
        "/books",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid request body"}
    assert len(client.get("/books").json()) == 2


def test_create_book_wrong_field_type(client):
    response = client.post("/books", json={"title": ["Dune"], "author": "Frank Herbert"})
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid request body"}


def test_update_book(client):
    """Test updating an existing book."""
    response = client.put("/books/1", json={"title": "New Title", "author": "New Author"})
    assert response.status_code == 200
    assert response.json() == {"id": 1, "title": "New Title", "author": "New Author"}

    assert client.get("/books/1").json() == {"id": 1, "title": "New Title", "author": "New Author"}


def test_update_book_keeps_position(client):
    client.put("/books/1", json={"title": "New Title", "author": "New Author"})
    assert [book["id"] for book in client.get("/books").json()] == [1, 2]


def test_update_book_not_found(client):
    response = client.put("/books/999", json={"title": "Non-existent", "author": "Unknown"})
    assert response.status_code == 404
    assert response.json() == {"message": "Book not found"}
    assert client.get("/books").json() == [TOLKIEN, AUSTEN]


def test_update_book_with_missing_fields_clears_them(client):
    """Update does not validate its fields; omitted ones are cleared."""
    response = client.put("/books/2", json={"title": "Emma"})
    assert response.status_code == 200
    assert response.json() == {"id": 2, "title": "Emma", "author": None}
    assert client.get("/books/2").json() == {"id": 2, "title": "Emma", "author": None}


def test_delete_book(client):
    """Test deleting returns the removed book."""
    response = client.delete("/books/1")
    assert response.status_code == 200
    assert response.json() == {"message": "Book deleted", "book": TOLKIEN}

    assert client.get("/books/1").status_code == 404


def test_delete_book_not_found(client):
    response = client.delete("/books/999")
    assert response.status_code == 404
    assert response.json() == {"message": "Book not found"}


def test_delete_book_twice(client):
    assert client.delete("/books/2").status_code == 200
    assert client.delete("/books/2").status_code == 404


def test_deleted_id_is_not_reused(client, new_book):
    created = client.post("/books", json=new_book).json()
    client.delete(f"/books/{created['id']}")

    again = client.post("/books", json=new_book).json()
    assert again["id"] == created["id"] + 1
    assert client.get(f"/books/{created['id']}").status_code == 404


def test_end_to_end_flow(client):
    created = client.post("/books", json={"title": "Dune", "author": "Frank Herbert"})
    assert created.status_code == 201
    assert created.json() == {"id": 3, "title": "Dune", "author": "Frank Herbert"}

    deleted = client.delete("/books/1")
    assert deleted.json()["book"] == TOLKIEN

    books = client.get("/books").json()
    assert [book["id"] for book in books] == [2, 3]


def test_apps_do_not_share_books(app, settings, new_book):
    """Each application owns its own store."""
    with TestClient(app) as first, TestClient(create_app(settings=settings)) as second:
        first.post("/books", json=new_book)
        assert len(first.get("/books").json()) == 3
        assert len(second.get("/books").json()) == 2


def test_unseeded_app_starts_empty(new_book):
    settings = Settings(_env_file=None, seed_books=False, metrics_enabled=False)
    with TestClient(create_app(settings=settings)) as client:
        assert client.get("/books").json() == []
        assert client.post("/books", json=new_book).json()["id"] == 1


class FailingBookStore(BookStore):
    """A store whose listing blows up unexpectedly."""

    def list_books(self):
        raise RuntimeError("store exploded")


def test_unexpected_error_is_internal_server_error(settings):
    app = create_app(settings=settings, store=FailingBookStore.seeded())
    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/books")
        assert response.status_code == 500
        assert response.json() == {"message": "Internal server error"}

        assert client.get("/books/1").status_code == 200
