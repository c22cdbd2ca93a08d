"""
REST Notes — Custom Exception Hierarchy
========================================

What:  Application-specific exceptions for the error scenarios of the API.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by services and repositories; caught by global handlers.

Exception Hierarchy:
    RestNotesError (base)
    ├── ValidationError              → 400 Bad Request (client can fix)
    │   ├── InvalidReferenceError    → 400 (tag URI is malformed)
    │   └── UnknownTagError          → 400 (tag URI names no tag)
    ├── NotFoundError                → 404 Not Found
    └── DatabaseError                → 500 Internal Server Error

All of them are terminal for the request: nothing is retried, and the
per-request session is rolled back.
"""

from typing import Any, Dict, Optional


class RestNotesError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(RestNotesError):
    """
    Raised when client input fails a business rule.

    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "The tag '/tags/abc' is invalid",
            "details": {"field": "tagUris", "location": "/tags/abc"}
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


class InvalidReferenceError(ValidationError):
    """
    A tag URI does not match `/tags/{id}` or its id is not a positive integer.
    """

    def __init__(self, location: str):
        super().__init__(
            message=f"The tag '{location}' is invalid",
            field="tagUris",
            context={"location": location},
        )
        self.location = location


class UnknownTagError(ValidationError):
    """A tag URI is well-formed but no tag with that id exists."""

    def __init__(self, location: str, tag_id: int):
        super().__init__(
            message=f"The tag '{location}' does not exist",
            field="tagUris",
            context={"location": location, "tag_id": tag_id},
        )
        self.location = location
        self.tag_id = tag_id


class NotFoundError(RestNotesError):
    """
    Raised when a requested resource does not exist.

    HTTP:    404 Not Found

    Repositories return None for missing rows; services convert that None
    into this exception so routes never check for it themselves.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = str(resource_id)
        super().__init__(message=message, context=ctx)


class DatabaseError(RestNotesError):
    """
    Raised when database operations fail unexpectedly.

    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. Driver details
    (SQL, constraint names) go to the server log only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
