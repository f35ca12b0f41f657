"""
Children's Church API — Custom Exception Hierarchy
====================================================

What:  Application-specific exceptions for the error scenarios of the API.
Why:   Targeted error handling with the right HTTP status code and a short
       human-readable message, without leaking file paths or parser output.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses.
Who:   Raised by the store and the services; caught by global handlers.

Exception Hierarchy:
    ChurchApiError (base)
    ├── ValidationError      → 400 Bad Request (client can fix)
    ├── NotFoundError        → 404 Not Found
    ├── StoreError           → 500 Internal Server Error (I/O fault)
    │   └── CorruptStoreError → 500 Internal Server Error (unparseable document)
"""

from typing import Any, Dict, Optional


class ChurchApiError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned for server errors)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(ChurchApiError):
    """
    Raised when client input fails validation.

    When:    Missing or blank required fields, malformed request body.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Question text is required",
            "details": {"field": "text"}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(ChurchApiError):
    """
    Raised when a requested record does not exist.

    When:    Unknown or non-numeric id on get/update/delete.
    HTTP:    404 Not Found

    The message is the short form the UI already knows ("Note not found");
    the resource and id are kept in context for the logs.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class StoreError(ChurchApiError):
    """
    Raised when reading or writing the backing JSON file fails.

    When:    Permission denied, disk full, directory missing, I/O error.
    HTTP:    500 Internal Server Error

    The file path goes into context only; clients get a generic message.
    """

    def __init__(
        self,
        message: str = "The data store is unavailable. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class CorruptStoreError(StoreError):
    """
    Raised when the backing file exists but does not hold a valid document.

    When:    Invalid JSON, a non-object top level, or records of the wrong shape.
    HTTP:    500 Internal Server Error

    The file is never repaired automatically; an operator has to fix or
    remove it.
    """

    def __init__(
        self,
        message: str = "The data store is corrupt.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
