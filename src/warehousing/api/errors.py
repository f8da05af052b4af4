"""Error responses for the Warehousing API.

Every failure is returned as::

    {"timestamp": ..., "status": 404, "error": "Resource Not Found",
     "message": "...", "path": "/api/items/...", "validation_errors": {...}}

``validation_errors`` is present only for field-level validation failures.
"""

from datetime import UTC, datetime

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.integrations.fastapi import register_exception_handlers

from warehousing.exceptions import WarehousingError

logger = structlog.get_logger(__name__)


def error_response(request: Request, status: int, error: str, message: str, validation_errors=None) -> JSONResponse:
    body = {
        "timestamp": datetime.now(UTC).isoformat(),
        "status": status,
        "error": error,
        "message": message,
        "path": request.url.path,
    }
    if validation_errors:
        body["validation_errors"] = validation_errors
    return JSONResponse(status_code=status, content=body)


async def handle_warehousing_error(request: Request, exc: WarehousingError) -> JSONResponse:
    return error_response(request, exc.status_code, exc.title, exc.message)


async def handle_not_found(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return error_response(request, 404, "Resource Not Found", str(exc))


async def handle_domain_validation(request: Request, exc: ValidationError) -> JSONResponse:
    fields = {field: "; ".join(str(m) for m in messages) for field, messages in exc.messages.items()}
    return error_response(request, 400, "Validation Failed", "Invalid input parameters", fields)


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = {}
    for error in exc.errors():
        field = str(error["loc"][-1]) if error.get("loc") else "body"
        fields.setdefault(field, error.get("msg", "Invalid value"))
    return error_response(request, 400, "Validation Failed", "Invalid input parameters", fields)


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", path=request.url.path)
    return error_response(request, 500, "Internal Server Error", f"An unexpected error occurred: {exc}")


def register_error_handlers(app: FastAPI) -> None:
    """Install Protean's handlers, then override them with the warehousing payload."""
    register_exception_handlers(app)
    app.add_exception_handler(WarehousingError, handle_warehousing_error)
    app.add_exception_handler(ObjectNotFoundError, handle_not_found)
    app.add_exception_handler(ValidationError, handle_domain_validation)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(Exception, handle_unexpected)
