"""Route tree index — which child segments exist under a prefix.

Patterns are inserted into a trie once, at setup, and never mutated
afterwards. Lookups take a prefix of *names* (bracket-stripped, as the
navigator sees them) and follow every edge that positionally matches:
static edges by literal equality, bracket edges by wildcard.
"""

import logging

from waypoint.routing.segments import Segment, SegmentKind, parse_pattern

logger = logging.getLogger("waypoint.routing")


class _IndexNode:
    """A node in the route trie. Mutable during construction only."""

    __slots__ = ("edges", "terminal")

    def __init__(self) -> None:
        # Raw segment text -> edge, in insertion order
        self.edges: dict[str, _Edge] = {}
        # True when a declared pattern ends here
        self.terminal = False


class _Edge:
    __slots__ = ("node", "order", "segment")

    def __init__(self, segment: Segment, order: int) -> None:
        self.segment = segment
        # Declaration index of the first pattern that created this edge
        self.order = order
        self.node = _IndexNode()


class RouteIndex:
    """Immutable index over the declared route patterns.

    Usage::

        index = RouteIndex(["/", "/blog/[slug]", "/docs/[...path]"])
        index.children([])                 # ("blog", "docs")
        index.original_segment(["blog"], "slug").raw   # "[slug]"
        index.resolve(["blog", "slug"])     # (Segment("blog"), Segment("[slug]"))

    Sibling declarations that share a name but differ in bracket form
    (``/a/[x]`` and ``/a/[...x]``) resolve first-declared-wins.

    Because a bracket edge matches any name, edges reached through a
    wildcard compete with literal ones on declaration order too: with
    ``/a/[x]/b`` declared before ``/a/y/[b]``, the names ``a, y, b``
    resolve to the static ``b`` under ``[x]`` and render ``/a/y/b``.
    """

    __slots__ = ("_patterns", "_root")

    def __init__(self, patterns: list[str] | tuple[str, ...]) -> None:
        self._root = _IndexNode()
        seen: dict[str, None] = {}
        for order, pattern in enumerate(patterns):
            if pattern in seen:
                continue
            seen[pattern] = None
            self._insert(pattern, order)
        self._patterns = tuple(seen)
        logger.debug("Indexed %d route patterns", len(self._patterns))

    def _insert(self, pattern: str, order: int) -> None:
        node = self._root
        for seg in parse_pattern(pattern):
            edge = node.edges.get(seg.raw)
            if edge is None:
                for sibling in node.edges.values():
                    if sibling.segment.name == seg.name:
                        logger.warning(
                            "Route %r declares %r where %r was declared first; "
                            "navigation to %r uses %r",
                            pattern,
                            seg.raw,
                            sibling.segment.raw,
                            seg.name,
                            sibling.segment.raw,
                        )
                        break
                edge = _Edge(seg, order)
                node.edges[seg.raw] = edge
            node = edge.node
        node.terminal = True

    @property
    def patterns(self) -> tuple[str, ...]:
        """Declared patterns, deduplicated, in declaration order."""
        return self._patterns

    def _frontier(self, prefix: list[str] | tuple[str, ...]) -> list[_IndexNode]:
        """All trie nodes reachable by following *prefix* positionally."""
        frontier = [self._root]
        for name in prefix:
            frontier = _advance(frontier, name)
            if not frontier:
                break
        return frontier

    def children(self, prefix: list[str] | tuple[str, ...]) -> tuple[str, ...]:
        """Names of the segments that may follow *prefix*, in declaration order."""
        edges = _child_edges(self._frontier(prefix))
        edges.sort(key=lambda e: e.order)
        names: dict[str, None] = {}
        for edge in edges:
            names.setdefault(edge.segment.name, None)
        return tuple(names)

    def original_segment(self, prefix: list[str] | tuple[str, ...], name: str) -> Segment | None:
        """Return the declared segment for child *name* under *prefix*.

        ``None`` when no declared pattern has such a child.
        """
        return _pick(self._frontier(prefix), name)

    def resolve(self, names: list[str] | tuple[str, ...]) -> tuple[Segment, ...]:
        """Replace each navigated name with its declared segment.

        Names that are not declared under their prefix become static
        literals equal to the name itself.
        """
        frontier = [self._root]
        resolved: list[Segment] = []
        for name in names:
            seg = _pick(frontier, name) if frontier else None
            resolved.append(seg or Segment(name, SegmentKind.STATIC, name))
            if frontier:
                frontier = _advance(frontier, name)
        return tuple(resolved)


def _child_edges(frontier: list[_IndexNode]) -> list[_Edge]:
    seen: set[int] = set()
    edges: list[_Edge] = []
    for node in frontier:
        for edge in node.edges.values():
            if id(edge) not in seen:
                seen.add(id(edge))
                edges.append(edge)
    return edges


def _advance(frontier: list[_IndexNode], name: str) -> list[_IndexNode]:
    """Step every frontier node along the edges that match *name*."""
    return [
        edge.node
        for edge in _child_edges(frontier)
        if edge.segment.is_param or edge.segment.raw == name
    ]


def _pick(frontier: list[_IndexNode], name: str) -> Segment | None:
    """First-declared edge named *name* among the frontier's children."""
    best: _Edge | None = None
    for edge in _child_edges(frontier):
        if edge.segment.name == name and (best is None or edge.order < best.order):
            best = edge
    return best.segment if best is not None else None
