"""Filesystem route discovery for file-route style app directories.

Walks an app directory tree and returns one route pattern per directory
that contains a page file. Directory names become pattern segments
verbatim, so ``[slug]``, ``[...path]`` and ``[[...filters]]`` carry
straight through:

    app/page.py                         -> /
    app/blog/[slug]/page.py             -> /blog/[slug]
    app/(marketing)/about/page.py       -> /about
    app/docs/[...path]/page.py          -> /docs/[...path]

``(group)`` directories organize files without adding a segment.
``_private``, ``@slot`` and hidden directories are skipped.
"""

import logging
from pathlib import Path

from waypoint.errors import RouteDiscoveryError

logger = logging.getLogger("waypoint.discovery")

DEFAULT_PAGE_FILES: tuple[str, ...] = ("page.py", "page.html")


def discover_routes(
    app_dir: str | Path,
    *,
    page_files: tuple[str, ...] = DEFAULT_PAGE_FILES,
) -> list[str]:
    """Walk *app_dir* and return every declared route pattern.

    Args:
        app_dir: Root of the app directory.
        page_files: File names that make a directory a route.

    Returns:
        Sorted, deduplicated patterns ready for ``create_routes()``.

    Raises:
        RouteDiscoveryError: *app_dir* is not a directory.
    """
    root = Path(app_dir).resolve()
    if not root.is_dir():
        raise RouteDiscoveryError(f"App directory not found: {root}")

    patterns: set[str] = set()
    _walk_directory(root, url_parts=[], page_files=frozenset(page_files), patterns=patterns)
    result = sorted(patterns)
    logger.debug("Discovered %d routes under %s", len(result), root)
    return result


def _walk_directory(
    directory: Path,
    *,
    url_parts: list[str],
    page_files: frozenset[str],
    patterns: set[str],
) -> None:
    """Recursively collect patterns below *directory*.

    Args:
        directory: Current directory being walked.
        url_parts: Pattern segments accumulated so far.
        page_files: File names that mark a route.
        patterns: Accumulator for discovered patterns.
    """
    if any((directory / name).is_file() for name in page_files):
        patterns.add("/" + "/".join(url_parts))

    for item in sorted(directory.iterdir()):
        if not item.is_dir():
            continue
        name = item.name
        if name.startswith((".", "_", "@")):
            continue
        if name.startswith("(") and name.endswith(")"):
            # Route group: contributes no URL segment
            _walk_directory(item, url_parts=url_parts, page_files=page_files, patterns=patterns)
            continue
        _walk_directory(
            item,
            url_parts=[*url_parts, name],
            page_files=page_files,
            patterns=patterns,
        )
