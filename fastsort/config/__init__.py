"""
Configuration module for fastsort.

This module provides:
- BaseAppSettings: The base class for settings, supporting environment variable loading.
- Environment-specific settings (development, testing, production).
- get_settings: Factory for loading the correct settings class based on APP_ENV.

Example environment variables:

APP_ENV="development"  # Options: development, testing, production
DEBUG=true
LOG_LEVEL="INFO"
LOG_JSON_FORMAT=false
SORT_QUERY_PARAMETER="sort"
SORT_DEFAULT_DIRECTIONS='["asc", "desc"]'
"""

from .base import BaseAppSettings
from .development import DevelopmentSettings
from .production import ProductionSettings
from .settings import get_settings
from .testing import TestingSettings

__all__ = [
    "BaseAppSettings",
    "get_settings",
    "DevelopmentSettings",
    "ProductionSettings",
    "TestingSettings",
]
