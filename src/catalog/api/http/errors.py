"""Translation of failures into the JSON error body.

Every error response has the shape ``{timestamp, status, errors | message}``:
``errors`` maps a field to its message for rule violations, ``message`` is
free text for everything else.
"""

from collections.abc import Sequence
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.responses import JSONResponse

from src.catalog.core.exceptions import (
    MalformedEnumError,
    ProductNotFoundError,
    ProductValidationError,
)
from src.catalog.entities.service.product.enums import (
    ProductCategory,
    ProductInventoryStatus,
    member_names,
)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"
MALFORMED_JSON_MESSAGE = "Malformed JSON request body"

# body field -> (enum, label, plural label)
_ENUM_FIELDS: dict[str, tuple[type[Enum], str, str]] = {
    "category": (ProductCategory, "category", "categories"),
    "inventoryStatus": (ProductInventoryStatus, "inventory status", "statuses"),
    "inventory_status": (ProductInventoryStatus, "inventory status", "statuses"),
}


def error_body(
    status_code: int,
    *,
    errors: dict[str, str] | None = None,
    message: str | None = None,
) -> dict[str, Any]:
    body: dict[str, Any] = {
        "timestamp": datetime.now(UTC).isoformat(),
        "status": status_code,
    }
    if errors is not None:
        body["errors"] = errors
    if message is not None:
        body["message"] = message
    return body


def error_response(
    status_code: int,
    *,
    errors: dict[str, str] | None = None,
    message: str | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=error_body(status_code, errors=errors, message=message),
        headers=headers,
    )


def unexpected_error_response(headers: dict[str, str] | None = None) -> JSONResponse:
    """Generic 500 that leaks nothing about the cause."""
    return error_response(500, message=UNEXPECTED_ERROR_MESSAGE, headers=headers)


def _field_name(loc: Sequence[Any]) -> str:
    parts = [str(part) for part in loc if part != "body"]
    return ".".join(parts) or "body"


def find_malformed_enum(errors: Sequence[dict[str, Any]]) -> MalformedEnumError | None:
    """Return the first unknown enum literal among request validation errors."""
    for error in errors:
        if error.get("type") != "enum":
            continue
        field = str(error["loc"][-1]) if error.get("loc") else ""
        if field not in _ENUM_FIELDS:
            continue
        enum_cls, label, plural = _ENUM_FIELDS[field]
        return MalformedEnumError(
            label, plural, error.get("input"), member_names(enum_cls)
        )
    return None


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    malformed = find_malformed_enum(errors)
    if malformed is not None:
        return await malformed_enum_handler(request, malformed)

    if any(error.get("type") == "json_invalid" for error in errors):
        logger.info("Rejected unparsable request body")
        return error_response(400, message=MALFORMED_JSON_MESSAGE)

    field_errors: dict[str, str] = {}
    for error in errors:
        field_errors.setdefault(_field_name(error.get("loc", ())), error.get("msg", ""))
    logger.info("Rejected request body: {}", field_errors)
    return error_response(400, errors=field_errors)


async def product_validation_handler(
    request: Request, exc: ProductValidationError
) -> JSONResponse:
    logger.info("Rejected product: {}", exc.as_dict())
    return error_response(400, errors=exc.as_dict())


async def malformed_enum_handler(
    request: Request, exc: MalformedEnumError
) -> JSONResponse:
    logger.info("Rejected enum value: {}", exc)
    return error_response(400, message=str(exc))


async def product_not_found_handler(
    request: Request, exc: ProductNotFoundError
) -> JSONResponse:
    if request.app.state.config.app.errors.not_found_as_server_error:
        logger.warning("{} (reported as server error)", exc)
        return unexpected_error_response()
    return error_response(404, message=str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ProductValidationError, product_validation_handler)
    app.add_exception_handler(MalformedEnumError, malformed_enum_handler)
    app.add_exception_handler(ProductNotFoundError, product_not_found_handler)
