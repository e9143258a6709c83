"""Query string serialization.

Turns a search-parameter mapping into a canonical, percent-encoded
query string. Order follows the mapping's insertion order; ``None``
values are dropped entirely and lists emit one pair per element::

    serialize_query({"page": 1, "tags": ["a", "b"], "flag": True, "skip": None})
    -> "page=1&tags=a&tags=b&flag=true"
"""

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, urlencode

from waypoint.routing.render import render_value


def query_pairs(search_params: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """Flatten *search_params* into ordered ``(key, value)`` string pairs."""
    pairs: list[tuple[str, str]] = []
    if not search_params:
        return pairs
    for key, value in search_params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((str(key), render_value(v)) for v in value if v is not None)
        else:
            pairs.append((str(key), render_value(value)))
    return pairs


def serialize_query(search_params: Mapping[str, Any] | None) -> str:
    """Encode *search_params* as a query string, without the leading ``?``."""
    pairs = query_pairs(search_params)
    if not pairs:
        return ""
    return urlencode(pairs, quote_via=quote)


def append_query(path: str, search_params: Mapping[str, Any] | None) -> str:
    """Append ``?query`` to *path* when there is anything to append."""
    query = serialize_query(search_params)
    if not query:
        return path
    sep = "&" if "?" in path else "?"
    return f"{path}{sep}{query}"
