"""
Tests for sort policy declarations.
"""

import pytest
from pydantic import ValidationError

from fastsort.sorting import SortDirection, SortPolicy, SortSpec


class TestSortDirection:
    """Tests for the SortDirection enum."""

    def test_values(self):
        assert SortDirection.ASC == "asc"
        assert SortDirection.DESC == "desc"


class TestSortSpec:
    """Tests for SortSpec."""

    def test_defaults(self):
        spec = SortSpec(name="price")
        assert spec.allowed_directions == ("asc", "desc")
        assert spec.column is None
        assert spec.auto_apply is True

    def test_directions_accept_enum_members(self):
        spec = SortSpec(name="price", allowed_directions=[SortDirection.DESC])
        assert spec.allowed_directions == ("desc",)

    def test_single_direction_string(self):
        spec = SortSpec(name="price", allowed_directions="asc")
        assert spec.allowed_directions == ("asc",)

    def test_allows_is_case_sensitive(self):
        spec = SortSpec(name="price")
        assert spec.allows("asc")
        assert not spec.allows("ASC")
        assert not spec.allows("invalid")

    def test_describe(self):
        assert SortSpec(name="price").describe() == "price (asc, desc)"

    def test_is_immutable(self):
        spec = SortSpec(name="price")
        with pytest.raises(ValidationError):
            spec.name = "other"

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            SortSpec(name="")


class TestSortPolicy:
    """Tests for SortPolicy."""

    def test_keeps_declaration_order(self):
        policy = SortPolicy([SortSpec(name="b"), SortSpec(name="a")])
        assert [spec.name for spec in policy] == ["b", "a"]
        assert policy.index_of("a") == 1
        assert len(policy) == 2

    def test_duplicate_name_last_wins_in_place(self):
        policy = SortPolicy(
            [
                SortSpec(name="a"),
                SortSpec(name="b"),
                SortSpec(name="a", allowed_directions=["desc"]),
            ]
        )
        assert [spec.name for spec in policy] == ["a", "b"]
        assert policy.get("a").allowed_directions == ("desc",)

    def test_get_unknown(self):
        policy = SortPolicy([SortSpec(name="a")])
        assert policy.get("missing") is None
        assert policy.index_of("missing") is None
        assert "a" in policy
        assert "missing" not in policy

    def test_describe_lists_every_sort(self):
        policy = SortPolicy(
            [SortSpec(name="price"), SortSpec(name="name", allowed_directions=["asc"])]
        )
        assert policy.describe() == "price (asc, desc), name (asc)"

    def test_to_dict(self):
        policy = SortPolicy([SortSpec(name="price")])
        assert policy.to_dict() == {"price": ["asc", "desc"]}

    def test_coerce(self):
        policy = SortPolicy([SortSpec(name="a")])
        assert SortPolicy.coerce(policy) is policy
        assert len(SortPolicy.coerce([SortSpec(name="a")])) == 1
        assert len(SortPolicy.coerce(None)) == 0
