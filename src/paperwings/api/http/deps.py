"""FastAPI dependency implementations."""

from fastapi import Depends, Request

from src.paperwings.api.http.app_data import ApplicationDependencies
from src.paperwings.core.services import DbConnectionService, RecordStore
from src.paperwings.entities import (
    BookRepository,
    CartRepository,
    FavoriteRepository,
    TicketRepository,
    UserRepository,
)


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_database_service(request: Request) -> DbConnectionService:
    """Get the database connection service instance."""
    return get_app_dependencies(request).database_service


def get_record_store(request: Request) -> RecordStore:
    """Get the shared record store."""
    return get_app_dependencies(request).record_store


def get_user_repository(store: RecordStore = Depends(get_record_store)) -> UserRepository:
    return UserRepository(store)


def get_book_repository(store: RecordStore = Depends(get_record_store)) -> BookRepository:
    return BookRepository(store)


def get_cart_repository(store: RecordStore = Depends(get_record_store)) -> CartRepository:
    return CartRepository(store)


def get_favorite_repository(
    store: RecordStore = Depends(get_record_store),
) -> FavoriteRepository:
    return FavoriteRepository(store)


def get_ticket_repository(
    store: RecordStore = Depends(get_record_store),
) -> TicketRepository:
    return TicketRepository(store)
