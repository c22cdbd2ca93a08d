"""
REST Notes — Shared Wire Schemas
=================================

What:  Hypermedia building blocks (links, collection envelope) plus the error
       and health response models used by every router.

Link format (HAL-style):
    "_links": {
        "self": {"href": "http://localhost:8000/notes/1"},
        "tags": {"href": "http://localhost:8000/notes/1/tags"}
    }

Collection envelope:
    {"content": [<resource>, <resource>, ...]}
"""

from typing import Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")

# Largest identifier an INTEGER primary key can hold
MAX_ID = 2**31 - 1


class Link(BaseModel):
    """A single hypermedia link target."""
    href: str = Field(description="Absolute URI of the linked resource")


class Envelope(BaseModel, Generic[T]):
    """
    What:  Wrapper around an ordered list of resources.
    Who:   Returned by every collection endpoint (GET /notes, GET /tags, ...).
    Why:   A top-level object (rather than a bare JSON array) leaves room for
           collection-level fields without breaking clients.
    """
    content: List[T] = Field(description="Resources, in store order")


class IndexResource(BaseModel):
    """Entry point of the API: links to the top-level collections."""
    links: Dict[str, Link] = Field(alias="_links")

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "note with ID '7' was not found",
            "request_id": "1a2b3c4d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
