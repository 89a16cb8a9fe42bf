"""
Applying requested sorts to queries.

Validated sort fields are pushed onto a query builder in request order, one
ORDER BY clause per field. SQLAlchemy is the supported ORM integration; it
is an optional dependency (``pip install fastsort[orm]``) and applying sorts
without it raises MissingDependencyError.
"""

from importlib.util import find_spec
from typing import Any, Iterable, Optional, Protocol, Union, runtime_checkable

from fastsort.errors import MissingDependencyError
from fastsort.logging import get_logger
from fastsort.sorting.fields import SortField
from fastsort.sorting.policy import SortDirection, SortPolicy, SortSpec

logger = get_logger(__name__)


@runtime_checkable
class QueryBuilder(Protocol):
    """Anything that can append an ORDER BY clause."""

    def add_order_by(self, expression: Any, direction: str) -> Any:
        ...


def ensure_sqlalchemy() -> None:
    """
    Ensure the SQLAlchemy integration is installed.

    Raises:
        MissingDependencyError: If sqlalchemy cannot be imported
    """
    if find_spec("sqlalchemy") is None:
        raise MissingDependencyError(
            message=(
                "You need to install sqlalchemy (pip install fastsort[orm]) "
                "to apply sorts to ORM queries."
            ),
            dependency="sqlalchemy",
        )


class SQLAlchemyQueryBuilder:
    """
    QueryBuilder adapter around a SQLAlchemy ``Select`` or legacy ``Query``.

    String expressions are resolved against ``model`` when one is given,
    otherwise they become plain ``column()`` references. SQL expressions
    are used as they are.

    Attributes:
        statement: The statement with every ordering added so far
        model: Optional mapped class used to resolve column names

    Example:
        ```python
        builder = SQLAlchemyQueryBuilder(select(Item), Item)
        builder.add_order_by("price", "desc")
        items = session.scalars(builder.statement).all()
        ```
    """

    def __init__(self, statement: Any, model: Any = None):
        ensure_sqlalchemy()
        self.statement = statement
        self.model = model

    def resolve(self, expression: Any) -> Any:
        from sqlalchemy import column

        if not isinstance(expression, str):
            return expression
        if self.model is not None:
            return getattr(self.model, expression)
        return column(expression)

    def add_order_by(self, expression: Any, direction: str) -> "SQLAlchemyQueryBuilder":
        """
        Append an ORDER BY clause.

        Args:
            expression: Column name or SQL expression
            direction: ``asc`` or ``desc``, case-insensitive

        Raises:
            ValueError: If the direction is neither asc nor desc
        """
        from sqlalchemy import asc, desc

        order = desc if SortDirection(direction.lower()) is SortDirection.DESC else asc
        self.statement = self.statement.order_by(order(self.resolve(expression)))
        return self


def order_expression(sort_field: SortField, spec: Optional[SortSpec]) -> Any:
    """Return the declared column for a field, falling back to its name."""
    if spec is not None and spec.column is not None:
        return spec.column
    return sort_field.name


def apply_sorted_fields(
    query_builder: Any,
    sort_fields: Iterable[SortField],
    policy: Union[SortPolicy, Iterable[SortSpec], None] = None,
    model: Any = None,
) -> Any:
    """
    Apply sort fields to a query builder in request order.

    Fields are expected to be validated already; directions are not checked
    again here. Sorts declared with ``auto_apply=False`` are skipped.

    Args:
        query_builder: A QueryBuilder, or a raw SQLAlchemy statement/query
        sort_fields: Validated fields in request order
        policy: Policy the fields were linked against, used to find columns
        model: Mapped class used when wrapping a raw SQLAlchemy statement

    Returns:
        The builder itself, or the ordered statement when a raw SQLAlchemy
        statement was passed in

    Raises:
        MissingDependencyError: If the SQLAlchemy integration is not installed
    """
    ensure_sqlalchemy()

    policy = SortPolicy.coerce(policy)
    if isinstance(query_builder, QueryBuilder):
        builder = query_builder
    else:
        builder = SQLAlchemyQueryBuilder(query_builder, model)

    for sort_field in sort_fields:
        spec = sort_field.resolve_spec(policy)
        if spec is not None and not spec.auto_apply:
            logger.debug(f"Skipping sort '{sort_field.name}', not auto-applied")
            continue

        builder.add_order_by(order_expression(sort_field, spec), sort_field.direction)
        logger.debug(f"Applied sort {sort_field}")

    if builder is query_builder:
        return builder
    return builder.statement
