from typing import Any, List, Tuple

import pytest

from fastsort.sorting import SortPolicy, SortSpec


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    # Keep settings deterministic regardless of the developer's environment
    monkeypatch.delenv("APP_ENV", raising=False)
    monkeypatch.delenv("APP_NAME", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_JSON_FORMAT", raising=False)
    monkeypatch.delenv("SORT_QUERY_PARAMETER", raising=False)
    monkeypatch.delenv("SORT_DEFAULT_DIRECTIONS", raising=False)
    yield


@pytest.fixture
def price_policy():
    """Policy allowing price in both directions."""
    return SortPolicy([SortSpec(name="price", allowed_directions=["asc", "desc"])])


class RecordingQueryBuilder:
    """Query builder collaborator that records every ordering it receives."""

    def __init__(self):
        self.orderings: List[Tuple[Any, str]] = []

    def add_order_by(self, expression, direction):
        self.orderings.append((expression, direction))
        return self


@pytest.fixture
def recording_builder():
    return RecordingQueryBuilder()
