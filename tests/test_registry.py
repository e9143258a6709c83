"""Tests for waypoint.schemas.registry — per-route schemas and inheritance."""

from waypoint.routing.segments import parse_pattern
from waypoint.schemas.builtin import transform
from waypoint.schemas.registry import RouteSchemas, SchemaRegistry

upper = transform(lambda v: str(v).upper())
lower = transform(lambda v: str(v).lower())
double = transform(lambda v: int(v) * 2)


class TestRouteSchemasCoerce:
    def test_none(self) -> None:
        schemas = RouteSchemas.coerce(None)
        assert schemas.params == {}
        assert schemas.search_params == {}

    def test_flat_mapping_is_params(self) -> None:
        schemas = RouteSchemas.coerce({"id": double})
        assert schemas.params == {"id": double}
        assert schemas.search_params == {}

    def test_sectioned_mapping(self) -> None:
        schemas = RouteSchemas.coerce({"params": {"id": double}, "search_params": {"q": upper}})
        assert schemas.params == {"id": double}
        assert schemas.search_params == {"q": upper}

    def test_camel_case_search_params(self) -> None:
        schemas = RouteSchemas.coerce({"searchParams": {"q": upper}})
        assert schemas.search_params == {"q": upper}
        assert schemas.params == {}

    def test_param_named_like_a_section(self) -> None:
        schemas = RouteSchemas.coerce({"params": double})
        assert schemas.params == {"params": double}
        assert schemas.search_params == {}

    def test_mixed_section_names_with_schema_values(self) -> None:
        schemas = RouteSchemas.coerce({"params": double, "search_params": upper})
        assert schemas.params == {"params": double, "search_params": upper}

    def test_registry_accepts_param_named_params(self) -> None:
        registry = SchemaRegistry({"/search/[params]": {"params": double}})
        effective = registry.effective(parse_pattern("/search/[params]"), "params")
        assert effective == {"params": double}

    def test_passes_instance_through(self) -> None:
        original = RouteSchemas(params={"id": double})
        assert RouteSchemas.coerce(original) is original


class TestFindMatchingRoute:
    def test_exact_pattern(self) -> None:
        registry = SchemaRegistry({"/users/[id]": {"id": double}})
        route = registry.find_matching_route(parse_pattern("/users/[id]"))
        assert route is not None
        assert route.params == {"id": double}

    def test_positional_match(self) -> None:
        registry = SchemaRegistry({"/users/[id]": {"id": double}})
        route = registry.find_matching_route(parse_pattern("/users/[userId]"))
        assert route is not None

    def test_no_match(self) -> None:
        registry = SchemaRegistry({"/users/[id]": {"id": double}})
        assert registry.find_matching_route(parse_pattern("/posts/[id]")) is None

    def test_exact_beats_earlier_positional(self) -> None:
        registry = SchemaRegistry({
            "/users/[id]": {"id": double},
            "/users/me": {"id": upper},
        })
        route = registry.find_matching_route(parse_pattern("/users/me"))
        assert route is not None
        assert route.params == {"id": upper}


class TestInheritance:
    def test_child_inherits_parent_schema(self) -> None:
        registry = SchemaRegistry({"/app/[locale]": {"locale": upper}})
        effective = registry.effective(parse_pattern("/app/[locale]/dashboard"), "params")
        assert effective == {"locale": upper}

    def test_own_schema_wins(self) -> None:
        registry = SchemaRegistry({
            "/app/[locale]": {"locale": upper},
            "/app/[locale]/dashboard": {"locale": lower},
        })
        effective = registry.effective(parse_pattern("/app/[locale]/dashboard"), "params")
        assert effective["locale"] is lower

    def test_nearer_ancestor_wins(self) -> None:
        registry = SchemaRegistry({
            "/app/[locale]/settings": {"locale": lower},
            "/app": {"locale": upper},
        })
        effective = registry.effective(parse_pattern("/app/[locale]/settings/profile"), "params")
        assert effective["locale"] is lower

    def test_root_schemas_apply_everywhere(self) -> None:
        registry = SchemaRegistry({"/": {"locale": upper}})
        effective = registry.effective(parse_pattern("/blog/[slug]"), "params")
        assert effective == {"locale": upper}

    def test_inherited_excludes_exact_route(self) -> None:
        registry = SchemaRegistry({"/users/[id]": {"id": double}})
        assert registry.inherited(parse_pattern("/users/[id]"), "params") == {}

    def test_keys_merge_across_ancestors(self) -> None:
        registry = SchemaRegistry({
            "/org/[org]": {"org": lower},
            "/org/[org]/team/[team]": {"team": upper},
        })
        effective = registry.effective(
            parse_pattern("/org/[org]/team/[team]/members"), "params"
        )
        assert effective == {"org": lower, "team": upper}

    def test_same_length_first_declared_wins(self) -> None:
        registry = SchemaRegistry({
            "/a/[x]": {"x": upper},
            "/a/[y]": {"x": lower, "y": double},
        })
        effective = registry.inherited(parse_pattern("/a/[x]/b"), "params")
        assert effective == {"x": upper, "y": double}

    def test_search_params_inherit(self) -> None:
        registry = SchemaRegistry({"/shop": {"search_params": {"page": double}}})
        effective = registry.effective(parse_pattern("/shop/[[...filters]]"), "search_params")
        assert effective == {"page": double}

    def test_sections_are_independent(self) -> None:
        registry = SchemaRegistry({"/shop": {"params": {"page": double}}})
        assert registry.effective(parse_pattern("/shop"), "search_params") == {}


class TestRegistryMapping:
    def test_len_and_contains(self) -> None:
        registry = SchemaRegistry({"/a": None, "/b": {"x": upper}})
        assert len(registry) == 2
        assert "/a" in registry
        assert "/c" not in registry

    def test_get(self) -> None:
        registry = SchemaRegistry({"/b": {"x": upper}})
        route = registry.get("/b")
        assert route is not None
        assert route.params == {"x": upper}
        assert registry.get("/missing") is None
