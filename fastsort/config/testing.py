"""
Testing environment specific settings.
"""

from .base import BaseAppSettings


class TestingSettings(BaseAppSettings):
    """
    Settings class for testing environment.

    Attributes:
        DEBUG: Set to True for detailed test output
    """

    DEBUG: bool = True
