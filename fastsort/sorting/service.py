"""
Request-scoped sort handling.

SortService bundles parsing, validation, lookups and query application for
one request. Create one instance per request and hold it wherever the
request is handled; nothing in it is shared between requests.
"""

from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from fastsort.config import get_settings
from fastsort.logging import Logger, get_logger
from fastsort.sorting.applier import apply_sorted_fields
from fastsort.sorting.fields import SortField
from fastsort.sorting.parser import SortPair, parse_sort_query
from fastsort.sorting.policy import SortPolicy, SortSpec
from fastsort.sorting.validator import validate_sorts

_logger = get_logger(__name__)

PolicyLike = Union[SortPolicy, Iterable[SortSpec]]
SortParser = Callable[[Any, str], List[SortPair]]


class SortState(str, Enum):
    """
    Progress of one request through sort handling.

    Attributes:
        UNINITIALIZED: Nothing set or parsed yet
        POLICY_SET: Declared sorts are known, request not parsed yet
        PARSED: Requested sorts are parsed but not validated
        VALIDATED: Requested sorts passed validation and are safe to consume
    """

    UNINITIALIZED = "uninitialized"
    POLICY_SET = "policy_set"
    PARSED = "parsed"
    VALIDATED = "validated"


class SortService:
    """
    Sort handling for a single request.

    The requested sorts are parsed from the query on first access and cached
    for the lifetime of the instance.

    Attributes:
        query: Raw query input (query string, QueryParams or mapping)
        parameter: Name of the sort parameter group
        policy: Declared sorts of the endpoint

    Example:
        ```python
        service = SortService(request.query_params)
        service.handle_allowed_sorts([SortSpec(name="price"), SortSpec(name="name")])
        if service.has_sorted_field("price"):
            ...
        statement = service.apply_to_query(select(Item), model=Item)
        ```
    """

    def __init__(
        self,
        query: Any = None,
        policy: Optional[PolicyLike] = None,
        parser: SortParser = parse_sort_query,
        parameter: Optional[str] = None,
        logger: Optional[Logger] = None,
    ):
        self.query = query
        self.parameter = parameter or get_settings().SORT_QUERY_PARAMETER
        self.policy = SortPolicy()
        self.logger = logger or _logger
        self._parser = parser
        self._policy_set = False
        self._validated = False
        self._sort_fields: Optional[List[SortField]] = None

        if policy is not None:
            self.set_policy(policy)

    @property
    def state(self) -> SortState:
        if self._validated:
            return SortState.VALIDATED
        if self._sort_fields is not None:
            return SortState.PARSED
        if self._policy_set:
            return SortState.POLICY_SET
        return SortState.UNINITIALIZED

    @property
    def is_consumable(self) -> bool:
        """True once the requested sorts have been validated."""
        return self._validated

    def set_policy(self, policy: PolicyLike) -> None:
        """
        Set the declared sorts for this request.

        Fields that were already parsed are linked against the new policy
        without parsing the query again, and must be validated again.

        Args:
            policy: A SortPolicy or an iterable of SortSpec
        """
        self.policy = SortPolicy.coerce(policy)
        self._policy_set = True
        self._validated = False
        if self._sort_fields is not None:
            self._sort_fields = [field.relink(self.policy) for field in self._sort_fields]

    def handle_allowed_sorts(self, policy: PolicyLike) -> None:
        """
        Set the declared sorts and validate the request against them.

        Args:
            policy: A SortPolicy or an iterable of SortSpec

        Raises:
            SortError: If a requested sort is not allowed
        """
        self.set_policy(policy)
        validate_sorts(self.policy, self._load_sort_fields())
        self._validated = True

    def _load_sort_fields(self) -> List[SortField]:
        if self._sort_fields is None:
            pairs = self._parser(self.query, self.parameter)
            self._sort_fields = [
                SortField.from_policy(name, direction, self.policy)
                for name, direction in pairs
            ]
            self.logger.debug(
                f"Requested sorts: {', '.join(map(str, self._sort_fields)) or 'none'}"
            )
        return self._sort_fields

    def get_sorted_fields(self) -> List[SortField]:
        """
        Return all sort fields requested by the client, in request order.

        Returns:
            A new list on every call; the fields themselves are immutable
        """
        return list(self._load_sort_fields())

    all_sorted_fields = get_sorted_fields

    def has_sorted_field(self, name: str) -> bool:
        """Return True if the client requested a sort on ``name``."""
        return self.get_sorted_field(name) is not None

    def get_sorted_field(self, name: str) -> Optional[SortField]:
        """
        Return the first requested sort field with the given name.

        Args:
            name: Field name

        Returns:
            The sort field, or None if it was not requested
        """
        for sort_field in self._load_sort_fields():
            if sort_field.name == name:
                return sort_field
        return None

    def apply_to_query(self, query_builder: Any, model: Any = None) -> Any:
        """
        Apply all requested sort fields to a query builder.

        Args:
            query_builder: A QueryBuilder, or a raw SQLAlchemy statement/query
            model: Mapped class used to resolve column names of a raw statement

        Returns:
            See ``apply_sorted_fields``

        Raises:
            MissingDependencyError: If the SQLAlchemy integration is not installed
        """
        return apply_sorted_fields(
            query_builder, self._load_sort_fields(), self.policy, model=model
        )

    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        return {"sort": [field.to_dict() for field in self._load_sort_fields()]}
