"""
Error response schemas.

Rejected requests are answered with an ErrorResponse. When the rejection is
a disallowed sort, each error also lists the sorts the endpoint accepts so
clients can correct the request without reading the docs.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class AllowedSort(BaseModel):
    """A sort the endpoint accepts, as shown to clients."""

    name: str = Field(..., description="Field name usable in sort[<name>]")
    directions: List[str] = Field(..., description="Accepted direction tokens")


class ErrorInfo(BaseModel):
    """
    Detailed error information.

    Attributes:
        code: Error code identifier
        message: Human-readable error message
        field: Sort field that caused the error, if any
        details: Additional error details
        allowed_sorts: Sorts accepted by the endpoint, for SORT_NOT_ALLOWED
    """

    code: str = Field(..., description="Error code identifier")
    message: str = Field(..., description="Human-readable error message")
    field: Optional[str] = Field(
        default=None, description="Sort field that caused the error"
    )
    details: Optional[Dict[str, Any]] = Field(
        default=None, description="Additional error details"
    )
    allowed_sorts: Optional[List[AllowedSort]] = Field(
        default=None, description="Sorts accepted by the endpoint"
    )

    @classmethod
    def allowed_from_policy(cls, allowed: Dict[str, List[str]]) -> List[AllowedSort]:
        return [
            AllowedSort(name=name, directions=list(directions))
            for name, directions in allowed.items()
        ]


class ErrorResponse(BaseModel):
    """
    Envelope for error responses.

    Attributes:
        success: Always false
        message: Error message
        errors: List of error details
        timestamp: When the response was created (UTC)
    """

    success: bool = Field(default=False, description="Always false for error responses")
    message: str = Field(..., description="Error message")
    errors: List[ErrorInfo] = Field(
        default_factory=list, description="List of error details"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Timestamp of when the response was created",
    )
