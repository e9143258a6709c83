"""Path rendering — substitute parameter values into classified segments."""

from collections.abc import Mapping
from typing import Any

from waypoint.config import RoutesConfig
from waypoint.errors import MissingParamError
from waypoint.routing.segments import Segment, SegmentKind, format_pattern


def render_value(value: Any) -> str:
    """Stringify one scalar path or query value.

    Booleans render as ``true``/``false``; everything else via ``str()``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def render_path(
    segments: tuple[Segment, ...],
    params: Mapping[str, Any],
    config: RoutesConfig | None = None,
) -> str:
    """Render *segments* with *params* into a concrete path.

    - static: literal text
    - dynamic: ``str(params[name])``
    - catch-all: ``params[name]`` joined with ``/``
    - optional catch-all: dropped when absent, ``None`` or empty

    A dynamic or catch-all segment without a value keeps its bracket
    text (``/blog/[slug]``) unless ``config.strict_params`` is set, in
    which case ``MissingParamError`` is raised.
    """
    config = config or RoutesConfig()
    parts: list[str] = []

    for seg in segments:
        if seg.kind is SegmentKind.STATIC:
            parts.append(seg.raw)
            continue

        value = params.get(seg.name)

        if seg.kind is SegmentKind.OPTIONAL_CATCH_ALL:
            if value is None:
                continue
            if _is_sequence(value):
                parts.extend(render_value(v) for v in value)
            else:
                parts.append(render_value(value))
            continue

        missing = value is None or (_is_sequence(value) and not value)
        if missing:
            if config.strict_params:
                raise MissingParamError(seg.name, format_pattern(segments))
            parts.append(seg.raw)
        elif _is_sequence(value):
            parts.extend(render_value(v) for v in value)
        else:
            parts.append(render_value(value))

    path = "/" + "/".join(parts)
    if config.base_path:
        path = config.base_path + path if parts else config.base_path
    if config.trailing_slash and path != "/":
        path += "/"
    return path
