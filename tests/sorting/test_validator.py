"""
Tests for validating requested sorts against a policy.
"""

import pytest

from fastsort.errors import BadRequestError, SortError
from fastsort.sorting import (
    SortField,
    SortPolicy,
    SortSpec,
    is_allowed_sort_field,
    validate_sorts,
)


@pytest.fixture
def policy():
    return SortPolicy(
        [
            SortSpec(name="price", allowed_directions=["asc", "desc"]),
            SortSpec(name="name", allowed_directions=["asc"]),
        ]
    )


class TestIsAllowedSortField:
    """Tests for is_allowed_sort_field."""

    @pytest.mark.parametrize(
        "name,direction,expected",
        [
            ("price", "asc", True),
            ("price", "desc", True),
            ("name", "asc", True),
            ("name", "desc", False),
            ("price", "ASC", False),
            ("price", "invalid", False),
            ("created", "asc", False),
        ],
    )
    def test_allowed(self, policy, name, direction, expected):
        assert is_allowed_sort_field(policy, SortField(name, direction)) is expected


class TestValidateSorts:
    """Tests for validate_sorts."""

    def test_empty_request_is_valid(self, policy):
        validate_sorts(policy, [])
        validate_sorts(SortPolicy(), [])

    def test_all_allowed(self, policy):
        validate_sorts(policy, [SortField("name", "asc"), SortField("price", "desc")])

    def test_invalid_direction_message(self, price_policy):
        with pytest.raises(SortError) as excinfo:
            validate_sorts(price_policy, [SortField("price", "invalid")])

        assert str(excinfo.value) == (
            'Sort "price" with direction "invalid" is not allowed in this request. '
            "Available sorts: price (asc, desc)"
        )

    def test_unknown_field(self, price_policy):
        with pytest.raises(SortError) as excinfo:
            validate_sorts(price_policy, [SortField("name", "asc")])

        assert excinfo.value.field == "name"
        assert excinfo.value.direction == "asc"

    def test_first_violation_wins(self, policy):
        fields = [
            SortField("price", "asc"),
            SortField("name", "desc"),
            SortField("created", "asc"),
        ]
        with pytest.raises(SortError) as excinfo:
            validate_sorts(policy, fields)

        assert excinfo.value.field == "name"
        assert "created" not in excinfo.value.message

    def test_duplicates_validated_independently(self, policy):
        validate_sorts(policy, [SortField("price", "asc"), SortField("price", "desc")])

        with pytest.raises(SortError) as excinfo:
            validate_sorts(policy, [SortField("name", "asc"), SortField("name", "desc")])
        assert excinfo.value.direction == "desc"

    def test_error_details(self, policy):
        with pytest.raises(SortError) as excinfo:
            validate_sorts(policy, [SortField("name", "desc")])

        error = excinfo.value
        assert isinstance(error, BadRequestError)
        assert error.status_code == 400
        assert error.code == "SORT_NOT_ALLOWED"
        assert error.details == {
            "field": "name",
            "direction": "desc",
            "allowed": {"price": ["asc", "desc"], "name": ["asc"]},
        }

    def test_rejection_is_logged(self, price_policy, caplog):
        with pytest.raises(SortError):
            validate_sorts(price_policy, [SortField("price", "up")])

        assert any(
            record.levelname == "WARNING" and "price" in record.getMessage()
            for record in caplog.records
        )
