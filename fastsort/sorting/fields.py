"""
Requested sort fields.
"""

from typing import Any, Dict, Optional

from fastsort.sorting.policy import SortPolicy, SortSpec


class SortField:
    """
    One sort requested by the client.

    Instances are immutable. The matching policy entry is referenced by its
    position in the policy rather than held directly; use ``resolve_spec``
    to look it up.

    Attributes:
        name: Requested field name
        direction: Requested direction token, exactly as sent
        spec_index: Position of the matching SortSpec in the policy, if any
    """

    __slots__ = ("_name", "_direction", "_spec_index")

    def __init__(self, name: str, direction: str, spec_index: Optional[int] = None):
        self._name = name
        self._direction = direction
        self._spec_index = spec_index

    @classmethod
    def from_policy(cls, name: str, direction: str, policy: SortPolicy) -> "SortField":
        """Create a field linked to the policy entry sharing its name."""
        return cls(name, direction, policy.index_of(name))

    @property
    def name(self) -> str:
        return self._name

    @property
    def direction(self) -> str:
        return self._direction

    @property
    def spec_index(self) -> Optional[int]:
        return self._spec_index

    def resolve_spec(self, policy: SortPolicy) -> Optional[SortSpec]:
        """
        Return the SortSpec this field was matched to.

        Args:
            policy: The policy the field was linked against

        Returns:
            The matching spec, or None if the field matched nothing
        """
        if self._spec_index is None or self._spec_index >= len(policy):
            return None
        spec = policy[self._spec_index]
        # Linked against a different policy
        if spec.name != self._name:
            return None
        return spec

    def relink(self, policy: SortPolicy) -> "SortField":
        """Return a copy of this field linked against another policy."""
        return SortField.from_policy(self._name, self._direction, policy)

    def to_dict(self) -> Dict[str, Any]:
        return {"field": self._name, "direction": self._direction}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SortField):
            return NotImplemented
        return (self._name, self._direction, self._spec_index) == (
            other._name,
            other._direction,
            other._spec_index,
        )

    def __hash__(self) -> int:
        return hash((self._name, self._direction, self._spec_index))

    def __str__(self) -> str:
        return f"{self._name}:{self._direction}"

    def __repr__(self) -> str:
        return f"SortField(name='{self._name}', direction='{self._direction}')"
