"""
errors.py — Translation of failures into JSON error responses

Every non-2xx response leaves the API through one of the handlers below and
has the same body shape (schemas.shared.ErrorResponse):

    {"status": 404, "error": "Event Not Found",
     "message": "Event not found with id: 9999", "path": "/api/events/9999"}

Domain failures are looked up in ERROR_TABLE; request-parsing failures and
framework HTTP errors have their own handlers; everything else is a 500.
"""

from __future__ import annotations

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.exceptions import EventNotFoundError, EventServiceError, InvalidEventError
from schemas.shared import ErrorResponse

logger = logging.getLogger(__name__)


# failure kind → (HTTP status, error label)
ERROR_TABLE: dict[type[EventServiceError], tuple[int, str]] = {
    EventNotFoundError: (404, "Event Not Found"),
    InvalidEventError:  (400, "Invalid Event Data"),
}

VALIDATION_FAILED = (400, "Validation Failed")        # request body schema
CONSTRAINT_VIOLATION = (400, "Constraint Violation")  # path / query parameters
INTERNAL_ERROR = (500, "Internal Server Error")


def error_response(request: Request, status: int, error: str, message: str) -> JSONResponse:
    body = ErrorResponse(status=status, error=error, message=message, path=request.url.path)
    return JSONResponse(status_code=status, content=body.model_dump())


def lookup_error(exc: EventServiceError) -> tuple[int, str]:
    """Resolve the (status, label) pair for a domain failure, walking the MRO."""
    for kind in type(exc).__mro__:
        if kind in ERROR_TABLE:
            return ERROR_TABLE[kind]
    return INTERNAL_ERROR


def _field_name(loc: tuple) -> str:
    # ("body", "eventDate") → "eventDate"; ("path", "event_id") → "event_id"
    parts = [str(p) for p in loc[1:]] or [str(p) for p in loc]
    return ".".join(parts)


async def event_error_handler(request: Request, exc: EventServiceError) -> JSONResponse:
    status, label = lookup_error(exc)
    logger.info(
        "request rejected",
        extra={"path": request.url.path, "status_code": status, "error": exc.message},
    )
    return error_response(request, status, label, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = ", ".join(f"{_field_name(tuple(err['loc']))}: {err['msg']}" for err in errors)
    in_body = any(err["loc"] and err["loc"][0] == "body" for err in errors)
    status, label = VALIDATION_FAILED if in_body else CONSTRAINT_VIOLATION
    return error_response(request, status, label, message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Structured JSON for framework HTTP errors (unknown route, 405, ...)."""
    try:
        label = HTTPStatus(exc.status_code).phrase
    except ValueError:
        label = "Error"
    response = error_response(request, exc.status_code, label, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions: log the traceback, return clean JSON."""
    logger.error(
        "unhandled exception",
        extra={
            "request_id": getattr(request.state, "request_id", None),
            "method": request.method,
            "path": request.url.path,
            "error": str(exc),
        },
        exc_info=True,
    )
    status, label = INTERNAL_ERROR
    return error_response(request, status, label, str(exc) or label)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EventServiceError, event_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
