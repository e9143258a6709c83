"""Per-route schema registry with ancestor inheritance.

Schemas are registered against exact route patterns. For a concrete
route, the effective schema set is every matching ancestor's schemas,
shortest ancestor first, overlaid with the route's own::

    registry = SchemaRegistry({
        "/app/[locale]": {"params": {"locale": upper}},
        "/app/[locale]/dashboard": None,
    })
    registry.effective(parse_pattern("/app/[locale]/dashboard"), "params")
    # {"locale": upper}
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

from waypoint.routing.segments import Segment, format_pattern, parse_pattern, segments_match

logger = logging.getLogger("waypoint.schemas")

type SchemaKind = Literal["params", "search_params"]

_SECTION_KEYS = frozenset({"params", "search_params", "searchParams"})


def _is_sectioned(value: Mapping[str, Any]) -> bool:
    if not value or not set(value) <= _SECTION_KEYS:
        return False
    return all(v is None or isinstance(v, Mapping) for v in value.values())


@dataclass(frozen=True, slots=True)
class RouteSchemas:
    """Schemas declared for one exact route pattern.

    Attributes:
        params: Path parameter name -> schema (or passthrough marker).
        search_params: Search parameter name -> schema.
    """

    params: Mapping[str, Any] = field(default_factory=dict)
    search_params: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def coerce(cls, value: "RouteSchemas | Mapping[str, Any] | None") -> "RouteSchemas":
        """Build from ``None``, a ``RouteSchemas``, or a plain mapping.

        A mapping whose keys are all ``params`` / ``search_params`` (or
        ``searchParams``) and whose values are all mappings is read
        section by section; any other mapping is taken as ``params``
        directly, so a segment named ``[params]`` keeps its schema.
        """
        if value is None:
            return cls()
        if isinstance(value, RouteSchemas):
            return value
        if _is_sectioned(value):
            search = value.get("search_params", value.get("searchParams"))
            return cls(params=dict(value.get("params") or {}), search_params=dict(search or {}))
        return cls(params=dict(value))

    def section(self, kind: SchemaKind) -> Mapping[str, Any]:
        return self.params if kind == "params" else self.search_params


class SchemaRegistry:
    """Immutable map of route pattern -> ``RouteSchemas``.

    Built once by ``create_routes()``. Declaration order is kept and is
    the tie-breaker whenever two patterns of the same length match the
    same path: the first declared wins.
    """

    __slots__ = ("_entries", "_exact")

    def __init__(self, schemas: Mapping[str, Any] | None = None) -> None:
        entries: list[tuple[str, tuple[Segment, ...], RouteSchemas]] = []
        for pattern, value in (schemas or {}).items():
            entries.append((pattern, parse_pattern(pattern), RouteSchemas.coerce(value)))
        self._entries = tuple(entries)
        self._exact = {pattern: route for pattern, _, route in entries}
        logger.debug("Registered schemas for %d routes", len(entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._exact

    def get(self, pattern: str) -> RouteSchemas | None:
        """Schemas registered for exactly *pattern*."""
        return self._exact.get(pattern)

    def _matching(self, segments: tuple[Segment, ...]) -> list[RouteSchemas]:
        return [
            route
            for _, pattern_segments, route in self._entries
            if segments_match(pattern_segments, segments)
        ]

    def find_matching_route(self, segments: tuple[Segment, ...]) -> RouteSchemas | None:
        """The route's own schemas: exact pattern text first, then positional."""
        exact = self._exact.get(format_pattern(segments))
        if exact is not None:
            return exact
        matches = self._matching(segments)
        return matches[0] if matches else None

    def inherited(self, segments: tuple[Segment, ...], kind: SchemaKind) -> dict[str, Any]:
        """Merge schemas from every registered ancestor of *segments*.

        Prefix lengths are visited shortest first so more specific
        ancestors override less specific ones. The path itself is not
        included; see ``find_matching_route``.
        """
        merged: dict[str, Any] = {}
        for length in range(len(segments)):
            # Reversed so the first-declared pattern wins per key.
            for route in reversed(self._matching(segments[:length])):
                merged.update(route.section(kind))
        return merged

    def effective(self, segments: tuple[Segment, ...], kind: SchemaKind) -> dict[str, Any]:
        """Inherited schemas overlaid with the route's own (own wins)."""
        merged = self.inherited(segments, kind)
        own = self.find_matching_route(segments)
        if own is not None:
            merged.update(own.section(kind))
        return merged
