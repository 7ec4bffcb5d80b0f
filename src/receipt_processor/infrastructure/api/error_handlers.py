"""
Exception handlers for the receipts API.

Every error body is a flat JSON object: validation failures map field
paths such as ``items[0].price`` to a message, everything else uses a
single ``error`` key.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from receipt_processor.domain.exceptions import DomainException, EntityNotFoundError

logger = logging.getLogger(__name__)

MALFORMED_JSON_MESSAGE = "Malformed JSON request."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"
RESOURCE_NOT_FOUND_MESSAGE = "The requested resource could not be found."

# Messages for fields that are absent or null, keyed by wire name.
REQUIRED_MESSAGES = {
    "retailer": "Retailer name is required and must not be blank.",
    "purchaseDate": "Purchase date is required.",
    "purchaseTime": "Purchase time is required.",
    "items": "Items list is required and must not be null.",
    "shortDescription": "Short description is required and must not be blank.",
    "price": "Price is required.",
    "total": "Total amount is required.",
}


def validation_errors_to_fields(errors: Iterable[dict[str, Any]]) -> dict[str, str]:
    """Flatten pydantic errors into ``{"items[0].price": "message"}``.

    Works on both FastAPI request errors (locations prefixed with
    ``body``) and errors raised by ``model_validate_json`` directly.
    """
    fields: dict[str, str] = {}
    for error in errors:
        if error["type"] == "json_invalid":
            return {"error": MALFORMED_JSON_MESSAGE}
        path, name = _field_path(error["loc"])
        fields.setdefault(path or "error", _message_for(error, name))
    return fields


def _field_path(loc: Iterable[Any]) -> tuple[str, str | None]:
    parts = list(loc)
    if parts and parts[0] == "body":
        parts = parts[1:]
    path = ""
    name = None
    for part in parts:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
            name = str(part)
    return path, name


def _message_for(error: dict[str, Any], name: str | None) -> str:
    if name is None and error["type"] == "missing":
        return "Request body is required."
    if error["type"] == "missing" or error.get("input", ...) is None:
        return REQUIRED_MESSAGES.get(name or "", "Field is required.")
    return error["msg"]


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def validation_exception_handler(request: Request, exc: RequestValidationError):
    fields = validation_errors_to_fields(exc.errors())
    logger.warning("Validation failed for %s %s: %s", request.method, request.url.path, fields)
    return JSONResponse(status_code=HTTP_400_BAD_REQUEST, content=fields)


def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == HTTP_404_NOT_FOUND:
        logger.warning("Requested resource not found: %s %s", request.method, request.url.path)
        message = RESOURCE_NOT_FOUND_MESSAGE
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )


def not_found_exception_handler(request: Request, exc: EntityNotFoundError):
    logger.info("Not found: %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=HTTP_404_NOT_FOUND, content={"error": str(exc)})


def domain_exception_handler(request: Request, exc: DomainException):
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=HTTP_400_BAD_REQUEST, content={"error": str(exc)})


def generic_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": UNEXPECTED_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(EntityNotFoundError, not_found_exception_handler)
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
