"""Response helpers shared by the entity routers."""

from starlette.responses import JSONResponse

from src.paperwings.api.http import responses
from src.paperwings.api.http.schemas import UpdateRequest
from src.paperwings.core.services import InsertResult, WriteResult
from src.paperwings.entities._base import EntityRepository, Row


def created(result: InsertResult, label: str) -> JSONResponse:
    if result.affected_rows > 0:
        return responses.success(
            {"message": f"{label} added successfully", "id": result.inserted_id}, 201
        )
    return responses.error(f"Error adding the {label.lower()}", 400)


def found(rows: list[Row], label: str) -> JSONResponse:
    if not rows:
        return responses.error(f"{label} not found", 404)
    return responses.success(rows[0])


def updated(repository: EntityRepository, request: UpdateRequest) -> JSONResponse:
    if not request.is_complete:
        return responses.error("Insufficient data for the update", 400)

    result: WriteResult = repository.update(
        request.id_field, request.id, request.update_data
    )
    if result.affected_rows > 0:
        return responses.success("Record updated successfully")
    return responses.error("No record found to update", 404)


def deleted(result: WriteResult, label: str) -> JSONResponse:
    if result.affected_rows > 0:
        return responses.success(f"{label} deleted successfully")
    return responses.error(f"{label} not found", 404)
