"""Schemas — per-route parameter validation with ancestor inheritance.

Usage::

    from waypoint.schemas import as_int, rules, slug

    routes = create_routes(
        ["/users/[id]", "/users/[id]/posts/[slug]"],
        {"/users/[id]": {"id": as_int}},
    )
    # "/users/[id]/posts/[slug]" inherits the "id" schema
    routes.users.id.posts.slug.get_route({"id": "7", "slug": "hi"})
"""

from waypoint.schemas.builtin import (
    Issue,
    Rules,
    SchemaResult,
    Transform,
    Validator,
    as_float,
    as_int,
    choice,
    rules,
    segment,
    slug,
    transform,
)
from waypoint.schemas.registry import RouteSchemas, SchemaRegistry
from waypoint.schemas.validate import is_schema, run_schema, validate_params

__all__ = [
    "Issue",
    "RouteSchemas",
    "Rules",
    "SchemaRegistry",
    "SchemaResult",
    "Transform",
    "Validator",
    "as_float",
    "as_int",
    "choice",
    "is_schema",
    "rules",
    "run_schema",
    "segment",
    "slug",
    "transform",
    "validate_params",
]
