"""
Sort validation.

Cross-checks requested sort fields against the endpoint's policy. The check
is fail-fast: the first field that is not allowed raises a SortError and no
further fields are inspected.
"""

from typing import Iterable

from fastsort.errors import SortError
from fastsort.logging import get_logger
from fastsort.sorting.fields import SortField
from fastsort.sorting.policy import SortPolicy

logger = get_logger(__name__)


def is_allowed_sort_field(policy: SortPolicy, sort_field: SortField) -> bool:
    """
    Check a requested sort field against the declared sorts.

    Args:
        policy: Declared sorts of the endpoint
        sort_field: Field requested by the client

    Returns:
        True if a sort with the same name allows the requested direction
    """
    spec = policy.get(sort_field.name)
    return spec is not None and spec.allows(sort_field.direction)


def validate_sorts(policy: SortPolicy, sort_fields: Iterable[SortField]) -> None:
    """
    Ensure every requested sort field is allowed by the policy.

    Fields are checked in request order. Repeated names are checked
    independently against the same declared sort.

    Args:
        policy: Declared sorts of the endpoint
        sort_fields: Fields requested by the client

    Raises:
        SortError: For the first field that is not allowed
    """
    for sort_field in sort_fields:
        if is_allowed_sort_field(policy, sort_field):
            continue

        message = (
            f'Sort "{sort_field.name}" with direction "{sort_field.direction}" '
            f"is not allowed in this request. Available sorts: {policy.describe()}"
        )
        logger.warning(
            message,
            extra={"sort_field": sort_field.name, "direction": sort_field.direction},
        )
        raise SortError(
            message=message,
            field=sort_field.name,
            direction=sort_field.direction,
            allowed=policy.to_dict(),
        )
