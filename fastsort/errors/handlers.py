"""
Exception handlers for FastAPI applications.

Converts fastsort exceptions into ErrorResponse payloads. Disallowed sorts
become 400 responses listing the accepted sorts; a missing ORM integration
becomes a logged 500.
"""

import traceback
from functools import partial
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from fastsort.config.base import BaseAppSettings
from fastsort.errors.exceptions import AppError, MissingDependencyError, SortError
from fastsort.logging import Logger, ensure_logger
from fastsort.schemas import ErrorInfo, ErrorResponse


def error_info(exc: AppError) -> ErrorInfo:
    """Build the ErrorInfo entry for an application error."""
    if isinstance(exc, SortError):
        return ErrorInfo(
            code=exc.code,
            message=exc.message,
            field=exc.field,
            details={"direction": exc.direction},
            allowed_sorts=ErrorInfo.allowed_from_policy(exc.allowed),
        )
    return ErrorInfo(code=exc.code, message=exc.message, details=exc.details or None)


async def app_error_handler(
    request: Request, exc: AppError, logger: Optional[Logger] = None
) -> JSONResponse:
    """
    Handler for AppError and its subclasses.

    Args:
        request: FastAPI request
        exc: AppError instance
        logger: Logger used for configuration errors

    Returns:
        JSON response with error details
    """
    if isinstance(exc, MissingDependencyError):
        log = ensure_logger(logger, __name__)
        log.error(
            f"Configuration error while handling {request.url.path}: {exc.message}",
            extra={"dependency": exc.dependency},
        )

    response = ErrorResponse(message=exc.message, errors=[error_info(exc)])
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(response),
    )


async def unhandled_exception_handler(
    request: Request, exc: Exception, logger: Optional[Logger] = None
) -> JSONResponse:
    """
    Generic handler for unhandled exceptions.

    Args:
        request: FastAPI request
        exc: Unhandled exception
        logger: Optional logger to use instead of default logging

    Returns:
        JSON response with generic error message
    """
    log = ensure_logger(logger, __name__)
    log.error(f"Unhandled exception: {str(exc)}")
    log.error(traceback.format_exc())

    response = ErrorResponse(
        message="Internal server error",
        errors=[ErrorInfo(code="INTERNAL_ERROR", message="Internal server error")],
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=jsonable_encoder(response),
    )


def register_exception_handlers(app: FastAPI, logger: Optional[Logger] = None) -> None:
    """
    Register all exception handlers with a FastAPI application.

    Args:
        app: FastAPI application instance
        logger: Optional logger for logging exceptions
    """
    # Covers SortError and MissingDependencyError
    app.exception_handler(AppError)(partial(app_error_handler, logger=logger))

    app.exception_handler(Exception)(partial(unhandled_exception_handler, logger=logger))


def setup_errors(
    app: FastAPI,
    settings: Optional[BaseAppSettings] = None,
    logger: Optional[Logger] = None,
) -> None:
    """
    Configure error handling for a FastAPI application.

    Args:
        app: FastAPI application instance
        settings: Settings used to configure the fallback logger
        logger: Optional logger for logging exceptions
    """
    register_exception_handlers(app, logger=ensure_logger(logger, __name__, settings))
