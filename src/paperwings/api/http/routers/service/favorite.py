"""Favorites API router."""

from typing import Any

from fastapi import APIRouter, Body, Depends
from starlette.responses import JSONResponse

from src.paperwings.api.http import responses
from src.paperwings.api.http.deps import get_favorite_repository
from src.paperwings.api.http.routers.service._crud import created, deleted, found, updated
from src.paperwings.api.http.schemas import UpdateRequest
from src.paperwings.entities.service.favorite import FavoriteRepository

router = APIRouter()


@router.get("/user/{uid}")
def list_user_favorites(
    uid: str,
    repository: FavoriteRepository = Depends(get_favorite_repository),
) -> JSONResponse:
    return responses.success(repository.get_by_uid(uid))


@router.delete("/user/{uid}/book/{id_book}")
def remove_favorite_book(
    uid: str,
    id_book: str,
    repository: FavoriteRepository = Depends(get_favorite_repository),
) -> JSONResponse:
    return deleted(repository.delete_by_uid_and_book(uid, id_book), "Favorite")


@router.get("/{item_id}")
def get_favorite(
    item_id: str,
    repository: FavoriteRepository = Depends(get_favorite_repository),
) -> JSONResponse:
    return found(repository.get_by_id(item_id), "Favorite")


@router.delete("/{item_id}")
def delete_favorite(
    item_id: str,
    repository: FavoriteRepository = Depends(get_favorite_repository),
) -> JSONResponse:
    return deleted(repository.delete_by_id(item_id), "Favorite")


@router.get("")
def list_favorites(
    repository: FavoriteRepository = Depends(get_favorite_repository),
) -> JSONResponse:
    return responses.success(repository.list_all())


@router.post("")
def add_favorite(
    favorite: dict[str, Any] = Body(...),
    repository: FavoriteRepository = Depends(get_favorite_repository),
) -> JSONResponse:
    return created(repository.add(favorite), "Favorite")


@router.put("/update")
def update_favorite(
    request: UpdateRequest,
    repository: FavoriteRepository = Depends(get_favorite_repository),
) -> JSONResponse:
    return updated(repository, request)
