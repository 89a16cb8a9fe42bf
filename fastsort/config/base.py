"""
Base configuration module for fastsort.

This module provides the base settings class that environment-specific
settings classes inherit from. It covers the application name, debug mode,
logging output and the defaults used when negotiating sort parameters.
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class BaseAppSettings(BaseSettings):
    """
    Base settings class for application configuration.

    Attributes:
        APP_NAME: The name of the application
        DEBUG: Flag to enable/disable debug mode
        VERSION: Application version string
        LOG_LEVEL: Logging level used by package loggers
        LOG_JSON_FORMAT: Emit log records as JSON
        SORT_QUERY_PARAMETER: Name of the query parameter group holding sorts
        SORT_DEFAULT_DIRECTIONS: Directions allowed when a sort is declared by name only
    """

    APP_NAME: str = Field(default="FastSort")
    DEBUG: bool = Field(default=False)
    VERSION: str = Field(default="0.1.0")

    # Logging configuration
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_JSON_FORMAT: bool = Field(
        default=False, description="Emit log records as JSON"
    )

    # Sorting configuration
    SORT_QUERY_PARAMETER: str = Field(
        default="sort",
        description="Query parameter group holding requested sorts, e.g. sort[name]=asc",
    )
    SORT_DEFAULT_DIRECTIONS: List[str] = Field(
        default_factory=lambda: ["asc", "desc"],
        description="Directions allowed when a sort is declared by name only",
    )

    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, value):
        """Accept log levels in any case."""
        if isinstance(value, str):
            return value.upper()
        return value

    @field_validator("SORT_QUERY_PARAMETER")
    def validate_query_parameter(cls, value):
        """
        Ensure the sort parameter name can appear as a query key prefix.
        """
        if not value or "[" in value or "]" in value:
            raise ValueError(
                "SORT_QUERY_PARAMETER must be a non-empty name without brackets"
            )
        return value

    @field_validator("SORT_DEFAULT_DIRECTIONS")
    def validate_default_directions(cls, value):
        """Ensure at least one default direction is configured."""
        if not value:
            raise ValueError("SORT_DEFAULT_DIRECTIONS must not be empty")
        return value

    model_config = {"env_file": ".env", "extra": "ignore"}
