"""Lazy route navigation — the public entry point.

``create_routes()`` builds one immutable ``RouteTable`` and returns its
root ``RouteNode``. Each attribute access returns a new node one
segment deeper; calling ``get_route()`` resolves the accumulated names
against the table::

    routes = create_routes([
        "/",
        "/dashboard/settings",
        "/blog/[slug]",
        "/docs/[...path]",
        "/shop/[[...filters]]",
    ])

    routes.get_route()                                   # "/"
    routes.dashboard.settings.get_route()                # "/dashboard/settings"
    routes.blog.slug.get_route({"slug": "hello"})        # "/blog/hello"
    routes.docs.path.get_route({"path": ["api", "v2"]})  # "/docs/api/v2"
    routes.shop.filters.get_route({"filters": None})     # "/shop"

Navigation never fails. Names that aren't declared render as literal
segments; only ``get_route()`` can raise.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from waypoint.config import RoutesConfig
from waypoint.routing.index import RouteIndex
from waypoint.routing.query import append_query
from waypoint.routing.render import render_path
from waypoint.schemas.registry import SchemaRegistry
from waypoint.schemas.validate import validate_params

logger = logging.getLogger("waypoint.routing")


class RouteTable:
    """Everything a route tree needs, frozen at setup.

    Holds the route index, the schema registry and the rendering
    config. Shared by every node of one tree; independent tables can
    coexist in the same process.
    """

    __slots__ = ("config", "index", "schemas")

    def __init__(
        self,
        index: RouteIndex,
        schemas: SchemaRegistry,
        config: RoutesConfig,
    ) -> None:
        object.__setattr__(self, "index", index)
        object.__setattr__(self, "schemas", schemas)
        object.__setattr__(self, "config", config)

    def __setattr__(self, name: str, value: Any) -> None:
        msg = "RouteTable is immutable"
        raise AttributeError(msg)

    @property
    def patterns(self) -> tuple[str, ...]:
        """Declared route patterns in declaration order."""
        return self.index.patterns

    def build(
        self,
        names: tuple[str, ...],
        params: Mapping[str, Any] | None = None,
        search_params: Mapping[str, Any] | None = None,
    ) -> str:
        """Resolve navigated *names* into a concrete path string.

        1. Map names onto declared segments.
        2. Validate params and search params against effective schemas.
        3. Render the path.
        4. Append the query string.
        """
        segments = self.index.resolve(names)

        param_schemas = self.schemas.effective(segments, "params")
        values = validate_params(params, param_schemas, kind="param")

        search_schemas = self.schemas.effective(segments, "search_params")
        search = validate_params(search_params, search_schemas, kind="search param")

        path = render_path(segments, values, self.config)
        return append_query(path, search)


class RouteNode:
    """One position in the route tree: the names navigated so far.

    Immutable. Child access creates a fresh node; nothing is cached.

    Children are reachable three ways::

        routes.dashboard
        routes["dashboard"]
        routes.child("dashboard")

    Use the last two for names that aren't identifiers, start with an
    underscore, or collide with ``get_route`` / ``child``.
    """

    __slots__ = ("_names", "_table")

    def __init__(self, table: RouteTable, names: tuple[str, ...] = ()) -> None:
        object.__setattr__(self, "_table", table)
        object.__setattr__(self, "_names", names)

    def __setattr__(self, name: str, value: Any) -> None:
        msg = "RouteNode is immutable"
        raise AttributeError(msg)

    def __getattr__(self, name: str) -> "RouteNode":
        # Only reached for names not found normally. Private and dunder
        # lookups (copy, pickle, IPython probes) must not navigate.
        if name.startswith("_"):
            msg = f"{type(self).__name__!r} object has no attribute {name!r}"
            raise AttributeError(msg)
        return self.child(name)

    def __getitem__(self, name: str) -> "RouteNode":
        return self.child(name)

    def child(self, name: str) -> "RouteNode":
        """Return the node one segment below this one."""
        return RouteNode(self._table, (*self._names, name))

    def get_route(
        self,
        params: Mapping[str, Any] | None = None,
        search_params: Mapping[str, Any] | None = None,
    ) -> str:
        """Render this node's route.

        Args:
            params: Path parameter values keyed by segment name.
                Catch-all segments take a list; an optional catch-all
                set to ``None`` is dropped from the path.
            search_params: Query parameters. ``None`` values are
                omitted, lists repeat the key.

        Raises:
            ValidationError: A registered schema rejected a value.
            UnsupportedAsyncValidationError: A schema returned an awaitable.
            MissingParamError: A value is missing and ``strict_params`` is set.
        """
        return self._table.build(self._names, params, search_params)

    __call__ = get_route

    def __iter__(self) -> Iterator[str]:
        return iter(self._table.index.children(self._names))

    def __contains__(self, name: object) -> bool:
        return name in self._table.index.children(self._names)

    def __dir__(self) -> Iterable[str]:
        names = [n for n in self._table.index.children(self._names) if n.isidentifier()]
        return sorted({*names, "child", "get_route"})

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RouteNode):
            return NotImplemented
        return self._table is other._table and self._names == other._names

    def __hash__(self) -> int:
        return hash((id(self._table), self._names))

    def __repr__(self) -> str:
        return f"RouteNode({'/' + '/'.join(self._names)!r})"


def _declared_patterns(
    routes: Iterable[str] | Mapping[str, Any],
    schemas: Mapping[str, Any] | None,
) -> tuple[list[str], dict[str, Any]]:
    """Split the two accepted declaration shapes into patterns + schemas."""
    merged: dict[str, Any] = {}
    if isinstance(routes, Mapping):
        patterns = list(routes)
        merged.update({p: v for p, v in routes.items() if v is not None})
    elif isinstance(routes, str):
        patterns = [routes]
    else:
        patterns = list(routes)
    if schemas:
        merged.update(schemas)
    patterns.extend(p for p in merged if p not in patterns)
    return patterns, merged


def create_routes(
    routes: Iterable[str] | Mapping[str, Any] = (),
    schemas: Mapping[str, Any] | None = None,
    *,
    config: RoutesConfig | None = None,
) -> RouteNode:
    """Declare a route tree and return its root node.

    Args:
        routes: Route patterns, or a mapping of pattern -> schemas
            (``None`` for routes without schemas).
        schemas: Optional pattern -> schemas mapping. Each value is a
            ``RouteSchemas``, a ``{"params": ..., "search_params": ...}``
            mapping, or a flat ``name -> schema`` mapping for params.
            Patterns that only appear here are declared as well.
        config: Rendering options.

    Never raises for malformed or conflicting patterns; see
    ``RouteIndex`` for how sibling conflicts resolve.
    """
    patterns, merged = _declared_patterns(routes, schemas)
    table = RouteTable(
        index=RouteIndex(patterns),
        schemas=SchemaRegistry(merged),
        config=config or RoutesConfig(),
    )
    logger.debug(
        "Created route table: %d patterns, %d with schemas",
        len(table.patterns),
        len(table.schemas),
    )
    return RouteNode(table)
