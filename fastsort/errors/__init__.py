"""
Error handling module for fastsort.

This module provides the exceptions raised while negotiating sorts and the
handlers that turn them into error responses.

Limitations:
- Error response structure is fixed; customization requires code changes.
"""

from fastsort.errors.exceptions import (
    AppError,
    BadRequestError,
    MissingDependencyError,
    SortError,
)
from fastsort.errors.handlers import register_exception_handlers, setup_errors

__all__ = [
    "setup_errors",
    "register_exception_handlers",
    "AppError",
    "BadRequestError",
    "SortError",
    "MissingDependencyError",
]
