"""Waypoint — typed, validated URL paths from one route declaration.

Declare file-route style patterns once, navigate them as attributes,
and render concrete paths with validated parameters and a canonical
query string.

Basic usage::

    from waypoint import create_routes

    routes = create_routes([
        "/",
        "/dashboard/settings",
        "/users/[id]/posts/[post_id]",
        "/docs/[...path]",
    ])

    routes.dashboard.settings.get_route()
    # "/dashboard/settings"
    routes.users.id.posts.post_id.get_route({"id": 1, "post_id": 7})
    # "/users/1/posts/7"
    routes.docs.path.get_route({"path": ["api", "v2"]}, {"tab": "intro"})
    # "/docs/api/v2?tab=intro"

Schemas (any object with a synchronous ``validate``)::

    from waypoint.schemas import as_int

    routes = create_routes(["/users/[id]"], {"/users/[id]": {"id": as_int}})

Templates (``pip install waypoint[templates]``)::

    from waypoint.templating import register_routes
    register_routes(env, routes)
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "MissingParamError",
    "RouteDiscoveryError",
    "RouteNode",
    "RouteSchemas",
    "RouteTable",
    "RoutesConfig",
    "UnsupportedAsyncValidationError",
    "ValidationError",
    "WaypointError",
    "create_routes",
    "discover_routes",
    "serialize_query",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import waypoint`` fast while providing a clean top-level API.
    """
    if name in ("create_routes", "RouteNode", "RouteTable"):
        from waypoint import navigator as _nav

        return getattr(_nav, name)

    if name == "RoutesConfig":
        from waypoint.config import RoutesConfig

        return RoutesConfig

    if name == "RouteSchemas":
        from waypoint.schemas.registry import RouteSchemas

        return RouteSchemas

    if name == "serialize_query":
        from waypoint.routing.query import serialize_query

        return serialize_query

    if name == "discover_routes":
        from waypoint.discovery import discover_routes

        return discover_routes

    if name in (
        "ConfigurationError",
        "MissingParamError",
        "RouteDiscoveryError",
        "UnsupportedAsyncValidationError",
        "ValidationError",
        "WaypointError",
    ):
        from waypoint import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
