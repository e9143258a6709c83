"""Tests for waypoint.routing.index — child lookup and segment resolution."""

import logging

import pytest

from waypoint.routing.index import RouteIndex
from waypoint.routing.segments import SegmentKind, format_pattern, parse_pattern

APP_ROUTES = [
    "/",
    "/dashboard",
    "/dashboard/settings",
    "/blog/[slug]",
    "/users/[id]/posts/[postId]",
    "/docs/[...path]",
    "/shop/[[...filters]]",
]


@pytest.fixture
def index() -> RouteIndex:
    return RouteIndex(APP_ROUTES)


class TestChildren:
    def test_root_children_in_declaration_order(self, index: RouteIndex) -> None:
        assert index.children([]) == ("dashboard", "blog", "users", "docs", "shop")

    def test_static_children(self, index: RouteIndex) -> None:
        assert index.children(["dashboard"]) == ("settings",)

    def test_bracket_children_use_names(self, index: RouteIndex) -> None:
        assert index.children(["blog"]) == ("slug",)
        assert index.children(["docs"]) == ("path",)
        assert index.children(["shop"]) == ("filters",)

    def test_bracket_prefix_matches_any_name(self, index: RouteIndex) -> None:
        assert index.children(["users", "id"]) == ("posts",)
        assert index.children(["users", "anything"]) == ("posts",)

    def test_leaf_has_no_children(self, index: RouteIndex) -> None:
        assert index.children(["dashboard", "settings"]) == ()

    def test_unknown_prefix_has_no_children(self, index: RouteIndex) -> None:
        assert index.children(["nope", "deeper"]) == ()

    def test_union_across_static_and_bracket_siblings(self) -> None:
        index = RouteIndex(["/a/[x]/b", "/a/lit/c"])
        assert index.children(["a", "lit"]) == ("b", "c")
        assert index.children(["a", "x"]) == ("b",)


class TestOriginalSegment:
    def test_recovers_bracket_form(self, index: RouteIndex) -> None:
        seg = index.original_segment(["shop"], "filters")
        assert seg is not None
        assert seg.raw == "[[...filters]]"
        assert seg.kind is SegmentKind.OPTIONAL_CATCH_ALL

    def test_unknown_child(self, index: RouteIndex) -> None:
        assert index.original_segment(["shop"], "cart") is None

    def test_first_declared_wins(self) -> None:
        index = RouteIndex(["/a/[...x]", "/a/[x]"])
        seg = index.original_segment(["a"], "x")
        assert seg is not None
        assert seg.kind is SegmentKind.CATCH_ALL

    def test_conflict_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="waypoint.routing"):
            RouteIndex(["/a/[x]", "/a/[[...x]]"])
        assert "[[...x]]" in caplog.text
        assert "declared first" in caplog.text


class TestResolve:
    @pytest.mark.parametrize("pattern", APP_ROUTES)
    def test_every_pattern_is_reachable(self, index: RouteIndex, pattern: str) -> None:
        names = [s.name for s in parse_pattern(pattern)]
        for depth, name in enumerate(names):
            assert name in index.children(names[:depth])
        assert format_pattern(index.resolve(names)) == pattern

    def test_resolves_bracket_forms(self, index: RouteIndex) -> None:
        segments = index.resolve(["users", "id", "posts", "postId"])
        assert [s.raw for s in segments] == ["users", "[id]", "posts", "[postId]"]

    def test_wildcard_edge_declared_first_wins(self) -> None:
        index = RouteIndex(["/a/[x]/b", "/a/y/[b]"])
        segments = index.resolve(["a", "y", "b"])
        assert segments[2].kind is SegmentKind.STATIC
        assert format_pattern(segments) == "/a/y/b"

    def test_undeclared_name_is_static_literal(self, index: RouteIndex) -> None:
        segments = index.resolve(["dashboard", "billing"])
        assert segments[1].kind is SegmentKind.STATIC
        assert segments[1].raw == "billing"

    def test_undeclared_bracket_like_name_stays_static(self, index: RouteIndex) -> None:
        segments = index.resolve(["[weird]"])
        assert segments[0].kind is SegmentKind.STATIC

    def test_resolution_continues_after_unknown_name(self, index: RouteIndex) -> None:
        segments = index.resolve(["nope", "slug"])
        assert [s.kind for s in segments] == [SegmentKind.STATIC, SegmentKind.STATIC]


class TestPatterns:
    def test_deduplicates_in_order(self) -> None:
        index = RouteIndex(["/b", "/a", "/b"])
        assert index.patterns == ("/b", "/a")

    def test_empty(self) -> None:
        index = RouteIndex([])
        assert index.patterns == ()
        assert index.children([]) == ()
