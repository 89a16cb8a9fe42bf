"""
Sort request parsing.

Reads the ``sort`` parameter group from query input. Clients send one
bracketed key per field, for example::

    ?sort[price]=asc&sort[name]=desc

and the parser turns that into ``[("price", "asc"), ("name", "desc")]``.
Direction tokens are returned verbatim; deciding whether they are
acceptable is the validator's job. Input that is not shaped like a
mapping of names to directions yields no sorts rather than an error.
"""

import re
from typing import Any, Iterable, List, Mapping, Tuple
from urllib.parse import parse_qsl

from fastsort.logging import get_logger

logger = get_logger(__name__)

SortPair = Tuple[str, str]


def parse_sort_query(query: Any, parameter: str = "sort") -> List[SortPair]:
    """
    Extract requested sorts from query input.

    Args:
        query: A raw query string, a Starlette ``QueryParams`` (or anything
            with ``multi_items()``), a mapping (nested ``{"sort": {...}}`` or
            flat ``{"sort[name]": ...}``), or an iterable of key/value pairs
        parameter: Name of the parameter group, ``sort`` by default

    Returns:
        ``(name, direction)`` pairs in the order they appear in the request

    Example:
        ```python
        parse_sort_query("sort[price]=asc&sort[name]=desc")
        # [("price", "asc"), ("name", "desc")]
        ```
    """
    if query is None:
        return []

    if isinstance(query, Mapping) and parameter in query:
        pairs = _from_nested(query[parameter])
    else:
        pairs = _from_flat(_iter_items(query), parameter)

    logger.debug(f"Parsed {len(pairs)} requested sort(s) from '{parameter}'")
    return pairs


def _iter_items(query: Any) -> Iterable[Tuple[str, Any]]:
    if isinstance(query, (str, bytes)):
        if isinstance(query, bytes):
            query = query.decode("latin-1")
        return parse_qsl(query.lstrip("?"), keep_blank_values=True)

    if hasattr(query, "multi_items"):
        return query.multi_items()

    if isinstance(query, Mapping):
        items = []
        for key, value in query.items():
            # parse_qs style mappings hold a list of values per key
            if isinstance(value, (list, tuple)):
                items.extend((key, item) for item in value)
            else:
                items.append((key, value))
        return items

    if not isinstance(query, Iterable):
        return []
    # Keep only well-formed (key, value) pairs
    return [item for item in query if isinstance(item, (tuple, list)) and len(item) == 2]


def _from_nested(value: Any) -> List[SortPair]:
    if not isinstance(value, Mapping):
        return []

    pairs = []
    for name, direction in value.items():
        if not isinstance(name, str) or not name or not isinstance(direction, str):
            continue
        pairs.append((name, direction))
    return pairs


def _from_flat(items: Iterable[Tuple[str, Any]], parameter: str) -> List[SortPair]:
    key_pattern = re.compile(rf"^{re.escape(parameter)}\[([^\[\]]*)\](.*)$")

    pairs = []
    for key, value in items:
        if not isinstance(key, str):
            continue
        if key == parameter:
            # sort=price: a scalar where a mapping was expected
            return []

        match = key_pattern.match(key)
        if not match:
            continue

        name, rest = match.groups()
        if not name:
            # sort[]=asc: list shaped, not a mapping
            return []
        if rest or not isinstance(value, str):
            continue

        pairs.append((name, value))
    return pairs
