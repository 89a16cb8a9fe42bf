"""
Sort negotiation for API endpoints.

Clients request sorts with ``sort[<field>]=<direction>`` query parameters.
Endpoints declare which fields and directions they accept; requests asking
for anything else are rejected with SortError, and accepted sorts can be
applied to SQLAlchemy queries in request order.
"""

from fastsort.sorting.applier import (
    QueryBuilder,
    SQLAlchemyQueryBuilder,
    apply_sorted_fields,
    ensure_sqlalchemy,
)
from fastsort.sorting.dependencies import SortParams
from fastsort.sorting.fields import SortField
from fastsort.sorting.parser import parse_sort_query
from fastsort.sorting.policy import SortDirection, SortPolicy, SortSpec
from fastsort.sorting.service import SortService, SortState
from fastsort.sorting.validator import is_allowed_sort_field, validate_sorts

__all__ = [
    "SortDirection",
    "SortSpec",
    "SortPolicy",
    "SortField",
    "parse_sort_query",
    "validate_sorts",
    "is_allowed_sort_field",
    "SortService",
    "SortState",
    "QueryBuilder",
    "SQLAlchemyQueryBuilder",
    "apply_sorted_fields",
    "ensure_sqlalchemy",
    "SortParams",
]
