"""Kida template integration.

Exposes a route tree to templates so links come from the same
declarations as the rest of the app::

    register_routes(env, routes)

    <a href="{{ routes.blog.slug.get_route({'slug': post.slug}) }}">...</a>
    <a href="{{ '/search' | with_query(q=term, page=2) }}">Next</a>

Requires ``kida`` (``pip install waypoint[templates]``).
"""

from typing import Any

from waypoint.errors import ConfigurationError
from waypoint.navigator import RouteNode
from waypoint.routing.query import append_query


def with_query(path: str, **search_params: Any) -> str:
    """Append search parameters to a path.

    ``None`` values are omitted and lists repeat the key, exactly as in
    ``get_route(search_params=...)``.

    Example:
        {{ "/search" | with_query(q="pika", tag=["a", "b"]) }}
        → "/search?q=pika&tag=a&tag=b"

    """
    return append_query(str(path), search_params)


TEMPLATE_FILTERS: dict[str, Any] = {
    "with_query": with_query,
}


def register_routes(env: Any, routes: RouteNode, *, name: str = "routes") -> Any:
    """Bind *routes* as a global on a kida ``Environment``.

    Also registers the ``with_query`` filter. Returns *env* so the call
    can be chained during app setup.
    """
    try:
        import kida  # noqa: F401
    except ImportError as exc:
        msg = (
            "Template integration requires kida. "
            "Install it with: pip install waypoint[templates]"
        )
        raise ConfigurationError(msg) from exc

    env.update_filters(TEMPLATE_FILTERS)
    env.add_global(name, routes)
    return env
