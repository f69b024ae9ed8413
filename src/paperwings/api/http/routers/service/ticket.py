"""Ticket (purchase) API router."""

from typing import Any

from fastapi import APIRouter, Body, Depends
from starlette.responses import JSONResponse

from src.paperwings.api.http import responses
from src.paperwings.api.http.deps import get_ticket_repository
from src.paperwings.api.http.routers.service._crud import created, deleted, found, updated
from src.paperwings.api.http.schemas import UpdateRequest
from src.paperwings.entities.service.ticket import TicketRepository

router = APIRouter()


@router.get("/user/{uid}")
def list_user_tickets(
    uid: str,
    repository: TicketRepository = Depends(get_ticket_repository),
) -> JSONResponse:
    """List the purchase tickets of one user."""
    return responses.success(repository.get_by_uid(uid))


@router.get("/{item_id}")
def get_ticket(
    item_id: str,
    repository: TicketRepository = Depends(get_ticket_repository),
) -> JSONResponse:
    return found(repository.get_by_id(item_id), "Ticket")


@router.delete("/{item_id}")
def delete_ticket(
    item_id: str,
    repository: TicketRepository = Depends(get_ticket_repository),
) -> JSONResponse:
    return deleted(repository.delete_by_id(item_id), "Ticket")


@router.get("")
def list_tickets(
    repository: TicketRepository = Depends(get_ticket_repository),
) -> JSONResponse:
    return responses.success(repository.list_all())


@router.post("")
def add_ticket(
    ticket: dict[str, Any] = Body(...),
    repository: TicketRepository = Depends(get_ticket_repository),
) -> JSONResponse:
    return created(repository.add(ticket), "Ticket")


@router.put("/update")
def update_ticket(
    request: UpdateRequest,
    repository: TicketRepository = Depends(get_ticket_repository),
) -> JSONResponse:
    return updated(repository, request)
