"""Uniform JSON envelope returned by every API route."""

from typing import Any

from fastapi.encoders import jsonable_encoder
from starlette.responses import JSONResponse


def success(body: Any = "", status_code: int = 200) -> JSONResponse:
    """Render a successful response: ``{"error": false, "status": ..., "body": ...}``."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error": False,
            "status": status_code,
            "body": jsonable_encoder(body),
        },
    )


def error(
    message: Any = "Internal server error",
    status_code: int = 500,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Render a failed response: ``{"error": true, "status": ..., "body": ...}``."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error": True,
            "status": status_code,
            "body": jsonable_encoder(message),
        },
        headers=headers,
    )
