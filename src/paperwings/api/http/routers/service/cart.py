"""Shopping cart API router."""

from typing import Any

from fastapi import APIRouter, Body, Depends
from starlette.responses import JSONResponse

from src.paperwings.api.http import responses
from src.paperwings.api.http.deps import get_cart_repository
from src.paperwings.api.http.routers.service._crud import created, deleted, found, updated
from src.paperwings.api.http.schemas import UpdateRequest
from src.paperwings.entities.service.cart import CartRepository

router = APIRouter()


@router.get("/user/{uid}")
def list_user_cart(
    uid: str,
    repository: CartRepository = Depends(get_cart_repository),
) -> JSONResponse:
    """List the cart entries of one user."""
    return responses.success(repository.get_by_uid(uid))


@router.delete("/user/{uid}/book/{id_book}")
def remove_book_from_cart(
    uid: str,
    id_book: str,
    repository: CartRepository = Depends(get_cart_repository),
) -> JSONResponse:
    """Remove one book from a user's cart."""
    return deleted(repository.delete_by_uid_and_book(uid, id_book), "Cart entry")


@router.get("/{item_id}")
def get_cart_entry(
    item_id: str,
    repository: CartRepository = Depends(get_cart_repository),
) -> JSONResponse:
    return found(repository.get_by_id(item_id), "Cart entry")


@router.delete("/{item_id}")
def delete_cart_entry(
    item_id: str,
    repository: CartRepository = Depends(get_cart_repository),
) -> JSONResponse:
    return deleted(repository.delete_by_id(item_id), "Cart entry")


@router.get("")
def list_cart_entries(
    repository: CartRepository = Depends(get_cart_repository),
) -> JSONResponse:
    return responses.success(repository.list_all())


@router.post("")
def add_cart_entry(
    entry: dict[str, Any] = Body(...),
    repository: CartRepository = Depends(get_cart_repository),
) -> JSONResponse:
    """Add a book to a user's cart."""
    return created(repository.add(entry), "Cart entry")


@router.put("/update")
def update_cart_entry(
    request: UpdateRequest,
    repository: CartRepository = Depends(get_cart_repository),
) -> JSONResponse:
    return updated(repository, request)
