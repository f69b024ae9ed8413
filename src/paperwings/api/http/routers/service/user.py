"""User API router."""

from typing import Any

from fastapi import APIRouter, Body, Depends
from starlette.responses import JSONResponse

from src.paperwings.api.http import responses
from src.paperwings.api.http.deps import get_user_repository
from src.paperwings.api.http.routers.service._crud import created, deleted, found, updated
from src.paperwings.api.http.schemas import UpdateRequest
from src.paperwings.entities.core.user import UserRepository

router = APIRouter()


@router.post("")
def create_user(
    user: dict[str, Any] = Body(...),
    repository: UserRepository = Depends(get_user_repository),
) -> JSONResponse:
    """Register a user; the body carries the ``uid`` issued by the identity provider."""
    return created(repository.add(user), "User")


@router.put("/update")
def update_user(
    request: UpdateRequest,
    repository: UserRepository = Depends(get_user_repository),
) -> JSONResponse:
    return updated(repository, request)


@router.delete("/{uid}")
def delete_user(
    uid: str,
    repository: UserRepository = Depends(get_user_repository),
) -> JSONResponse:
    """Delete a user by UID."""
    return deleted(repository.delete_by_uid(uid), "User")


@router.get("/{uid}")
def get_user(
    uid: str,
    repository: UserRepository = Depends(get_user_repository),
) -> JSONResponse:
    """Get a user by UID."""
    return found(repository.get_by_uid(uid), "User")


@router.get("")
def list_users(
    repository: UserRepository = Depends(get_user_repository),
) -> JSONResponse:
    return responses.success(repository.list_all())
