"""Waypoint exception hierarchy.

Shared across the route index, schema registry, renderer and discovery
so every module raises and catches the same types.
"""


class WaypointError(Exception):
    """Base for all waypoint-specific errors."""


class ConfigurationError(WaypointError):
    """Raised when routes or their configuration are unusable.

    ``create_routes()`` itself never raises this; it surfaces from
    ``RoutesConfig`` construction or from a schema that cannot be
    evaluated synchronously.
    """


class ValidationError(WaypointError):
    """A registered schema rejected a parameter value.

    Carries the offending key and the schema's first issue message
    verbatim::

        Validation failed for param "id": Invalid id
    """

    def __init__(self, key: str, message: str, kind: str = "param") -> None:
        self.key = key
        self.message = message
        self.kind = kind
        super().__init__(f'Validation failed for {kind} "{key}": {message}')


class UnsupportedAsyncValidationError(ConfigurationError):
    """A schema's ``validate()`` returned an awaitable.

    Raised the moment the awaitable is seen, without awaiting it, so
    ``get_route()`` stays synchronous end to end.
    """

    def __init__(self, key: str, kind: str = "param") -> None:
        self.key = key
        self.kind = kind
        super().__init__(f'Async validation is not supported for {kind} "{key}"')


class MissingParamError(WaypointError):
    """A dynamic or catch-all segment had no value to render.

    Only raised when ``RoutesConfig(strict_params=True)``; the default
    renderer leaves the bracket text in place instead.
    """

    def __init__(self, name: str, pattern: str) -> None:
        self.name = name
        self.pattern = pattern
        super().__init__(f'Missing value for param "{name}" in route {pattern!r}')


class RouteDiscoveryError(WaypointError):
    """Raised when a route directory doesn't exist or can't be scanned."""
