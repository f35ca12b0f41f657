"""
Children's Church API — Shared Response Schemas
=================================================

What:  Response shapes that are not records: confirmations, errors, health.
"""

from typing import Optional

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Confirmation returned by DELETE endpoints, e.g. {"message": "Note deleted"}."""

    message: str = Field(description="Human-readable confirmation")


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.
    Why:   Clients need a consistent structure to parse errors programmatically.

    Fields:
        error: Machine-readable error code (e.g., "validation_error", "not_found")
        message: Human-readable description for display to users
        details: Optional extra context (e.g., which field failed validation)
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "validation_error",
            "message": "Title and content are required",
            "details": {"fields": ["title", "content"]},
            "request_id": "1a2b3c4d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """
    What:  Liveness payload returned by GET /health.
    Note:  Always served with 200; `store` reports whether the document file
           could be read, so monitoring can alert on it without the health check failing.
    """
    status: str = Field(description="Always 'ok' while the process is serving")
    message: str = Field(description="Human-readable liveness message")
    version: str = Field(description="Application version")
    store: str = Field(description="Document store state: readable, corrupt, unavailable")
    uptime_seconds: float = Field(description="Seconds since service started")
