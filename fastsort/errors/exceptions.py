"""
Exception classes for fastsort.

This module provides the exception hierarchy raised while negotiating sort
parameters. The exceptions are designed to be converted into HTTP responses
by the handlers in fastsort.errors.handlers.
"""

from http import HTTPStatus
from typing import Any, Dict, List, Optional


class AppError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message: Human-readable error message
        code: Error code identifier (default: ERROR)
        status_code: HTTP status code (default: 500)
        details: Additional error details
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        code: str = "ERROR",
        status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class BadRequestError(AppError):
    """Exception raised for general client-side errors."""

    def __init__(
        self,
        message: str = "Bad request",
        code: str = "BAD_REQUEST",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            code=code,
            status_code=HTTPStatus.BAD_REQUEST,
            details=details,
        )


class SortError(BadRequestError):
    """
    Exception raised when a requested sort is not permitted by the endpoint.

    Attributes:
        field: Name of the offending sort field
        direction: Direction requested for that field
        allowed: Allowed directions per declared sort, in declaration order
    """

    def __init__(
        self,
        message: str = "Sort is not allowed",
        field: Optional[str] = None,
        direction: Optional[str] = None,
        allowed: Optional[Dict[str, List[str]]] = None,
        code: str = "SORT_NOT_ALLOWED",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.field = field
        self.direction = direction
        self.allowed = allowed or {}

        details = dict(details or {})
        details.update(
            {"field": field, "direction": direction, "allowed": self.allowed}
        )

        super().__init__(message=message, code=code, details=details)


class MissingDependencyError(AppError):
    """
    Exception raised when an optional integration is not installed.

    This is a deployment problem, not a client error, so it maps to a 500.
    """

    def __init__(
        self,
        message: str = "A required dependency is not installed",
        dependency: Optional[str] = None,
        code: str = "MISSING_DEPENDENCY",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.dependency = dependency
        if dependency:
            details = dict(details or {})
            details["dependency"] = dependency

        super().__init__(
            message=message,
            code=code,
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            details=details,
        )
