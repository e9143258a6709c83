"""Route pattern segments.

A pattern like ``/docs/[...path]`` is a slash-separated list of segments:

    ``users``        static
    ``[id]``         dynamic, exactly one component
    ``[...path]``    catch-all, one or more components
    ``[[...slug]]``  optional catch-all, zero or more components

Classification is total: anything that isn't a well-formed bracket
form is a static literal.
"""

import re
from dataclasses import dataclass
from enum import Enum

# Bracket forms, most specific first. Names may not contain brackets or
# slashes, so "[a][b]" or "[[x]]" fall through to static. A dynamic name
# may not start with "...", which keeps "[...]" static.
_OPTIONAL_CATCH_ALL_RE = re.compile(r"^\[\[\.\.\.([^\[\]/]+)\]\]$")
_CATCH_ALL_RE = re.compile(r"^\[\.\.\.([^\[\]/]+)\]$")
_DYNAMIC_RE = re.compile(r"^\[(?!\.\.\.)([^\[\]/]+)\]$")


class SegmentKind(Enum):
    STATIC = "static"
    DYNAMIC = "dynamic"
    CATCH_ALL = "catch_all"
    OPTIONAL_CATCH_ALL = "optional_catch_all"


@dataclass(frozen=True, slots=True)
class Segment:
    """A classified segment of a route pattern.

    Static:             ``users``         (name == raw)
    Dynamic:            ``[id]``          (name="id")
    Catch-all:          ``[...path]``     (name="path")
    Optional catch-all: ``[[...slug]]``   (name="slug")
    """

    raw: str
    kind: SegmentKind
    name: str

    @property
    def is_param(self) -> bool:
        """True for every bracket form."""
        return self.kind is not SegmentKind.STATIC


def classify_segment(fragment: str) -> Segment:
    """Classify one pattern fragment. Never raises."""
    if m := _OPTIONAL_CATCH_ALL_RE.match(fragment):
        return Segment(fragment, SegmentKind.OPTIONAL_CATCH_ALL, m.group(1))
    if m := _CATCH_ALL_RE.match(fragment):
        return Segment(fragment, SegmentKind.CATCH_ALL, m.group(1))
    if m := _DYNAMIC_RE.match(fragment):
        return Segment(fragment, SegmentKind.DYNAMIC, m.group(1))
    return Segment(fragment, SegmentKind.STATIC, fragment)


def parse_pattern(pattern: str) -> tuple[Segment, ...]:
    """Parse a route pattern into classified segments.

    Examples::

        "/"                    -> ()
        "/dashboard/settings"  -> (Segment("dashboard"), Segment("settings"))
        "/blog/[slug]"         -> (Segment("blog"), Segment("[slug]", DYNAMIC, "slug"))
        "/shop/[[...filters]]" -> (..., Segment("[[...filters]]", OPTIONAL_CATCH_ALL, "filters"))
    """
    return tuple(classify_segment(part) for part in pattern.split("/") if part)


def format_pattern(segments: tuple[Segment, ...] | list[Segment]) -> str:
    """Join segments back into a pattern string (``/`` for the root)."""
    return "/" + "/".join(seg.raw for seg in segments)


def segments_match(pattern: tuple[Segment, ...], path: tuple[Segment, ...]) -> bool:
    """Positional match of *pattern* against an equally long *path*.

    A bracket segment in *pattern* matches anything; a static segment
    matches only the identical literal.
    """
    if len(pattern) != len(path):
        return False
    return all(p.is_param or p.raw == s.raw for p, s in zip(pattern, path, strict=True))
