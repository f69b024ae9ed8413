"""Book API router with CRUD and search operations."""

from typing import Any

from fastapi import APIRouter, Body, Depends
from starlette.responses import JSONResponse

from src.paperwings.api.http import responses
from src.paperwings.api.http.deps import get_book_repository
from src.paperwings.api.http.routers.service._crud import created, deleted, found, updated
from src.paperwings.api.http.schemas import UpdateRequest
from src.paperwings.entities.service.book import BookRepository

router = APIRouter()


@router.get("/search")
def search_books(
    title: str | None = None,
    author: str | None = None,
    language: str | None = None,
    category: str | None = None,
    isbn: str | None = None,
    repository: BookRepository = Depends(get_book_repository),
) -> JSONResponse:
    """Search books by the first attribute given: title, author, language, category or isbn."""
    books = repository.search(
        {
            "title": title,
            "author": author,
            "language": language,
            "category": category,
            "isbn": isbn,
        }
    )
    return responses.success(books)


@router.get("/{item_id}")
def get_book(
    item_id: str,
    repository: BookRepository = Depends(get_book_repository),
) -> JSONResponse:
    """Get a book by ID."""
    return found(repository.get_by_id(item_id), "Book")


@router.delete("/{item_id}")
def delete_book(
    item_id: str,
    repository: BookRepository = Depends(get_book_repository),
) -> JSONResponse:
    """Delete a book."""
    return deleted(repository.delete_by_id(item_id), "Book")


@router.get("")
def list_books(
    repository: BookRepository = Depends(get_book_repository),
) -> JSONResponse:
    """List all books."""
    return responses.success(repository.list_all())


@router.post("")
def create_book(
    book: dict[str, Any] = Body(...),
    repository: BookRepository = Depends(get_book_repository),
) -> JSONResponse:
    """Create a new book."""
    return created(repository.add(book), "Book")


@router.put("/update")
def update_book(
    request: UpdateRequest,
    repository: BookRepository = Depends(get_book_repository),
) -> JSONResponse:
    """Update the attributes of the books matching ``idField == id``."""
    return updated(repository, request)
