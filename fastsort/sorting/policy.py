"""
Sort policy declarations.

A policy is the server-side allow-list of sorts an endpoint accepts: which
field names may be sorted on and in which directions. Policies are declared
once per endpoint and never modified by request data.
"""

from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SortDirection(str, Enum):
    """
    Sort direction enum.

    Attributes:
        ASC: Ascending order
        DESC: Descending order
    """

    ASC = "asc"
    DESC = "desc"


DEFAULT_DIRECTIONS: Tuple[str, ...] = (SortDirection.ASC.value, SortDirection.DESC.value)


class SortSpec(BaseModel):
    """
    A single declared sort.

    Attributes:
        name: Field name clients use in ``sort[<name>]``
        allowed_directions: Direction tokens accepted for this field
        column: Column name or SQL expression to order by, defaults to ``name``
        auto_apply: Whether the query applier orders by this sort automatically

    Example:
        ```python
        SortSpec(name="price")
        SortSpec(name="created", allowed_directions=("desc",), column=Item.created_at)
        ```
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., min_length=1, description="Requested field name")
    allowed_directions: Tuple[str, ...] = Field(
        default=DEFAULT_DIRECTIONS, description="Allowed direction tokens"
    )
    column: Optional[Any] = Field(
        default=None, description="Column name or SQL expression to order by"
    )
    auto_apply: bool = Field(
        default=True, description="Apply automatically to query builders"
    )

    @field_validator("allowed_directions", mode="before")
    def coerce_directions(cls, value):
        """Accept any iterable of tokens, including SortDirection members."""
        if isinstance(value, (str, SortDirection)):
            value = (value,)
        return tuple(
            item.value if isinstance(item, SortDirection) else item for item in value
        )

    def allows(self, direction: str) -> bool:
        """Return True if ``direction`` is one of the allowed tokens."""
        return direction in self.allowed_directions

    def describe(self) -> str:
        """Human-readable form used in error messages, e.g. ``price (asc, desc)``."""
        return f"{self.name} ({', '.join(self.allowed_directions)})"


class SortPolicy:
    """
    Ordered collection of declared sorts, unique by name.

    Declaring the same name twice replaces the earlier spec in place,
    so the last declaration wins while the original position is kept.
    """

    def __init__(self, specs: Iterable[SortSpec] = ()):
        self._specs: List[SortSpec] = []
        self._index: Dict[str, int] = {}
        for spec in specs:
            self.add(spec)

    @classmethod
    def coerce(cls, policy: Union["SortPolicy", Iterable[SortSpec], None]) -> "SortPolicy":
        """Build a policy from a policy, an iterable of specs, or None."""
        if isinstance(policy, SortPolicy):
            return policy
        return cls(policy or ())

    def add(self, spec: SortSpec) -> None:
        if spec.name in self._index:
            self._specs[self._index[spec.name]] = spec
            return
        self._index[spec.name] = len(self._specs)
        self._specs.append(spec)

    def get(self, name: str) -> Optional[SortSpec]:
        index = self._index.get(name)
        return None if index is None else self._specs[index]

    def index_of(self, name: str) -> Optional[int]:
        return self._index.get(name)

    def describe(self) -> str:
        """Listing of every declared sort, e.g. ``price (asc, desc), name (asc)``."""
        return ", ".join(spec.describe() for spec in self._specs)

    def to_dict(self) -> Dict[str, List[str]]:
        return {spec.name: list(spec.allowed_directions) for spec in self._specs}

    def __getitem__(self, index: int) -> SortSpec:
        return self._specs[index]

    def __iter__(self) -> Iterator[SortSpec]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __repr__(self) -> str:
        return f"SortPolicy({self.describe()!r})"
