"""
Exception handlers mapping the content API's errors onto the JSON envelope

    {"error": {"status_code", "message", "type", "error_code", "details", "path"}}

Empty ``error_code``, ``details`` and ``path`` are left out.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from mondo.exceptions import ErrorCode, MondoError

logger = logging.getLogger(__name__)

# Only the statuses this service emits
ERROR_TYPES: dict[int, str] = {
    status.HTTP_400_BAD_REQUEST: "Bad Request",
    status.HTTP_404_NOT_FOUND: "Not Found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method Not Allowed",
    status.HTTP_409_CONFLICT: "Conflict",
    status.HTTP_422_UNPROCESSABLE_ENTITY: "Validation Error",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "Internal Server Error",
    status.HTTP_503_SERVICE_UNAVAILABLE: "Service Unavailable",
}

# Framework-raised HTTPExceptions carry no ErrorCode of their own
HTTP_ERROR_CODES: dict[int, ErrorCode] = {
    status.HTTP_400_BAD_REQUEST: ErrorCode.INVALID_ARGUMENT,
    status.HTTP_404_NOT_FOUND: ErrorCode.RESOURCE_NOT_FOUND,
    status.HTTP_409_CONFLICT: ErrorCode.DUPLICATE_RESOURCE,
    status.HTTP_422_UNPROCESSABLE_ENTITY: ErrorCode.VALIDATION_FAILED,
    status.HTTP_500_INTERNAL_SERVER_ERROR: ErrorCode.INTERNAL_ERROR,
    status.HTTP_503_SERVICE_UNAVAILABLE: ErrorCode.STORE_UNAVAILABLE,
}


def get_error_type(status_code: int) -> str:
    return ERROR_TYPES.get(status_code, "Error")


def get_http_error_code(status_code: int) -> str:
    return HTTP_ERROR_CODES.get(status_code, ErrorCode.UNKNOWN_ERROR).value


def create_error_response(
    status_code: int,
    message: str,
    error_code: str | ErrorCode | None = None,
    details: dict[str, Any] | None = None,
    path: str | None = None,
) -> JSONResponse:
    """Build the error envelope for ``status_code``."""
    if isinstance(error_code, ErrorCode):
        error_code = error_code.value
    optional = {"error_code": error_code, "details": details, "path": path}
    body: dict[str, Any] = {
        "status_code": status_code,
        "message": message,
        "type": get_error_type(status_code),
    }
    body.update({key: value for key, value in optional.items() if value})
    return JSONResponse(status_code=status_code, content={"error": body})


async def mondo_exception_handler(request: Request, exc: MondoError) -> JSONResponse:
    path = request.url.path
    level = logging.ERROR if exc.status_code >= 500 else logging.INFO
    logger.log(level, "%s on %s: %s [%s]", type(exc).__name__, path, exc.message, exc.error_code.value)
    return create_error_response(exc.status_code, exc.message, exc.error_code, exc.details, path)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unknown routes and wrong methods."""
    path = request.url.path
    logger.warning("HTTP %d on %s: %s", exc.status_code, path, exc.detail)
    return create_error_response(exc.status_code, str(exc.detail), get_http_error_code(exc.status_code), path=path)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Flatten pydantic's error list into ``details.validation_errors``."""
    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"] if loc != "body"),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]
    path = request.url.path
    logger.warning("Validation failed on %s: %d error(s)", path, len(errors))
    return create_error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Validation error",
        ErrorCode.VALIDATION_FAILED,
        {"validation_errors": errors},
        path,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort; the exception text stays in the log."""
    path = request.url.path
    logger.error("Unhandled %s on %s %s", type(exc).__name__, request.method, path, exc_info=exc)
    return create_error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred. Please try again later.",
        ErrorCode.INTERNAL_ERROR,
        path=path,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MondoError, mondo_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
