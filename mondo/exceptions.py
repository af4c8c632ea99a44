"""
Custom Exception Classes for the Mondo content API

Every failure surfaced by the store or the resolver is one of four kinds:
not found, conflict, invalid argument, or store failure. Routes never build
error responses themselves; the handlers in ``mondo.exception_handlers`` map
these exceptions to HTTP responses.
"""

import enum
from typing import Any

from fastapi import status


class ErrorCode(str, enum.Enum):
    """Machine-readable error codes returned in the ``error_code`` field."""

    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    CONTENT_NOT_FOUND = "RESOURCE_CONTENT_NOT_FOUND"
    DUPLICATE_RESOURCE = "VALIDATION_DUPLICATE_RESOURCE"
    INVALID_ARGUMENT = "VALIDATION_INVALID_ARGUMENT"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    STORE_FAILURE = "DATABASE_ERROR"
    STORE_UNAVAILABLE = "DATABASE_UNAVAILABLE"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class MondoError(Exception):
    """Base exception class for all Mondo API exceptions"""

    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
        error_code: ErrorCode | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        if error_code is not None:
            self.error_code = error_code
        super().__init__(self.message)


# ============================================================================
# Not Found
# ============================================================================


class ResourceNotFoundError(MondoError):
    """Base class for resource not found errors"""

    error_code = ErrorCode.RESOURCE_NOT_FOUND

    def __init__(self, resource_type: str, resource_id: Any | None = None, field: str = "id"):
        message = f"{resource_type} not found"
        if resource_id is not None:
            message = f"{resource_type} with {field} '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details={"resource_type": resource_type, "field": field, "resource_id": resource_id},
        )


class ContentNotFoundError(ResourceNotFoundError):
    """Raised when a post or portfolio item does not exist"""

    error_code = ErrorCode.CONTENT_NOT_FOUND

    def __init__(self, resource_type: str = "Content", resource_id: Any | None = None, field: str = "id"):
        super().__init__(resource_type=resource_type, resource_id=resource_id, field=field)


# ============================================================================
# Validation & Conflict
# ============================================================================


class InvalidArgumentError(MondoError):
    """Raised when an identifier or parameter is malformed"""

    error_code = ErrorCode.INVALID_ARGUMENT

    def __init__(self, message: str, field: str | None = None, value: Any | None = None):
        details: dict[str, Any] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message=message, status_code=status.HTTP_400_BAD_REQUEST, details=details)


class DuplicateContentError(MondoError):
    """Raised when a uniqueness constraint rejects a new row"""

    error_code = ErrorCode.DUPLICATE_RESOURCE

    def __init__(self, resource_type: str, field: str, value: Any):
        super().__init__(
            message=f"{resource_type} with {field} '{value}' already exists",
            status_code=status.HTTP_409_CONFLICT,
            details={"resource_type": resource_type, "field": field, "value": value},
        )


# ============================================================================
# Store
# ============================================================================


class StoreFailureError(MondoError):
    """Raised for connectivity, timeout, or any other store-level fault"""

    error_code = ErrorCode.STORE_FAILURE

    def __init__(self, message: str = "A database error occurred", operation: str | None = None, unavailable: bool = False):
        details = {"operation": operation} if operation else {}
        super().__init__(
            message=message,
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE if unavailable else status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code=ErrorCode.STORE_UNAVAILABLE if unavailable else ErrorCode.STORE_FAILURE,
        )
