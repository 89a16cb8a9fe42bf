"""
fastsort - Client sort negotiation for FastAPI applications.

Validates ``sort[<field>]=<direction>`` query parameters against the sorts an
endpoint declares, and applies the accepted ones to SQLAlchemy queries.

Usage:
    from fastapi import Depends, FastAPI
    from fastsort import SortParams, SortService, SortSpec, setup_errors

    app = FastAPI()
    setup_errors(app)

    @app.get("/items/")
    def list_items(sort: SortService = Depends(SortParams(SortSpec(name="price")))):
        ...
"""

__version__ = "0.1.0"

# Public API exports
from fastsort.config import BaseAppSettings, get_settings
from fastsort.errors import AppError, MissingDependencyError, SortError, setup_errors
from fastsort.logging import get_logger
from fastsort.sorting import (
    SortDirection,
    SortField,
    SortParams,
    SortPolicy,
    SortService,
    SortSpec,
    apply_sorted_fields,
    parse_sort_query,
    validate_sorts,
)
