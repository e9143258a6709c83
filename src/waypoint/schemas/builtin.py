"""Built-in schemas for route parameters.

Any object with a synchronous ``validate(value)`` works as a schema.
These cover the common cases without a validation library::

    from waypoint.schemas import as_int, choice, rules, slug

    routes = create_routes(
        ["/users/[id]", "/blog/[slug]", "/app/[locale]"],
        {
            "/users/[id]": {"id": as_int},
            "/blog/[slug]": {"slug": rules(slug)},
            "/app/[locale]": {"locale": rules(choice("en", "de"))},
        },
    )

Validators used with ``rules()`` have the signature::

    def rule(value: str) -> str | None:
        '''Return error message, or None if valid.'''

Parameterized validators are factory functions that return a validator.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

# Type alias for a validator function
type Validator = Callable[[str], str | None]


@dataclass(frozen=True, slots=True)
class Issue:
    """One reason a value was rejected."""

    message: str


@dataclass(frozen=True, slots=True)
class SchemaResult:
    """Outcome of ``validate()``: a value, or a non-empty tuple of issues.

    Falsy when invalid, like a form validation result::

        result = schema.validate("abc")
        if not result:
            print(result.issues[0].message)
    """

    value: Any = None
    issues: tuple[Issue, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.issues

    def __bool__(self) -> bool:
        return self.is_valid


class Transform:
    """Schema that maps the value through a function.

    ``ValueError`` and ``TypeError`` raised by the function become an
    issue carrying *message* (or the exception text).
    """

    __slots__ = ("_fn", "_message")

    def __init__(self, fn: Callable[[Any], Any], message: str | None = None) -> None:
        self._fn = fn
        self._message = message

    def validate(self, value: Any) -> SchemaResult:
        try:
            return SchemaResult(value=self._fn(value))
        except (ValueError, TypeError) as exc:
            return SchemaResult(issues=(Issue(self._message or str(exc)),))

    def __repr__(self) -> str:
        return f"Transform({self._fn!r})"


class Rules:
    """Schema that runs validators over ``str(value)``.

    Stops at the first failing validator. The original value is passed
    through unchanged on success.
    """

    __slots__ = ("_validators",)

    def __init__(self, *validators: Validator) -> None:
        self._validators = validators

    def validate(self, value: Any) -> SchemaResult:
        text = "" if value is None else str(value)
        for validator in self._validators:
            error = validator(text)
            if error is not None:
                return SchemaResult(issues=(Issue(error),))
        return SchemaResult(value=value)

    def __repr__(self) -> str:
        return f"Rules({len(self._validators)} validators)"


def transform(fn: Callable[[Any], Any], message: str | None = None) -> Transform:
    """Build a schema that maps values through *fn*."""
    return Transform(fn, message)


def rules(*validators: Validator) -> Rules:
    """Build a schema that checks values against *validators* in order."""
    return Rules(*validators)


as_int = Transform(int, "Must be a whole number")
as_float = Transform(float, "Must be a number")


# Lowercase words joined by single hyphens
_SLUG_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def segment(value: str) -> str | None:
    """Value must fill exactly one path component: non-empty, no ``/``."""
    if not value:
        return "Path segment must not be empty"
    if "/" in value:
        return "Path segment must not contain '/'"
    return None


def slug(value: str) -> str | None:
    """Value must be a URL slug (``my-first-post``)."""
    if not _SLUG_RE.match(value):
        return "Must be a lowercase slug"
    return None


def choice(*options: str) -> Validator:
    """Value must be one of the known segment values (locales, tabs...)."""
    known = frozenset(options)

    def check(value: str) -> str | None:
        if value not in known:
            return f"Unknown segment {value!r}; expected one of: {', '.join(options)}"
        return None

    return check
