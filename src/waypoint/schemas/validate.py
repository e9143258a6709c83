"""Synchronous parameter validation against registered schemas.

A schema is any object with a callable ``validate(value)``. Its result
is read structurally, so both attribute-style results and plain dicts
work::

    SchemaResult(value=42)                 -> ok, value 42
    {"value": 42}                          -> ok, value 42
    {"issues": [{"message": "Invalid"}]}   -> rejected with "Invalid"

Anything without ``validate`` is a passthrough marker.
"""

import inspect
from collections.abc import Mapping
from typing import Any

from waypoint.errors import UnsupportedAsyncValidationError, ValidationError


def is_schema(value: Any) -> bool:
    """True if *value* exposes a callable ``validate``."""
    return callable(getattr(value, "validate", None))


def _field(result: Any, name: str) -> Any:
    if isinstance(result, Mapping):
        return result.get(name)
    return getattr(result, name, None)


def _issue_message(issue: Any) -> str:
    if isinstance(issue, str):
        return issue
    if isinstance(issue, Mapping):
        return str(issue.get("message", ""))
    return str(getattr(issue, "message", issue))


def run_schema(schema: Any, key: str, value: Any, *, kind: str = "param") -> Any:
    """Validate one value and return its (possibly transformed) output.

    Raises ``ValidationError`` with the first issue's message, or
    ``UnsupportedAsyncValidationError`` if the schema returned an
    awaitable.
    """
    result = schema.validate(value)

    if inspect.isawaitable(result):
        # Never awaited; close coroutines so they don't warn on GC.
        if inspect.iscoroutine(result):
            result.close()
        raise UnsupportedAsyncValidationError(key, kind)

    issues = _field(result, "issues")
    if issues:
        raise ValidationError(key, _issue_message(list(issues)[0]), kind)
    return _field(result, "value")


def validate_params(
    raw: Mapping[str, Any] | None,
    schemas: Mapping[str, Any],
    *,
    kind: str = "param",
) -> dict[str, Any]:
    """Apply *schemas* to *raw*, failing fast on the first rejected key.

    Keys are visited in *raw*'s insertion order. Keys without a
    registered schema pass through unchanged. Returns a new dict.
    """
    validated: dict[str, Any] = {}
    if not raw:
        return validated
    for key, value in raw.items():
        schema = schemas.get(key)
        if is_schema(schema):
            validated[key] = run_schema(schema, key, value, kind=kind)
        else:
            validated[key] = value
    return validated
