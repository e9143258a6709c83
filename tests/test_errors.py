"""Tests for waypoint.errors — exception hierarchy and error messages."""

from waypoint.errors import (
    ConfigurationError,
    MissingParamError,
    RouteDiscoveryError,
    UnsupportedAsyncValidationError,
    ValidationError,
    WaypointError,
)


class TestHierarchy:
    def test_configuration_error_is_waypoint_error(self) -> None:
        assert issubclass(ConfigurationError, WaypointError)

    def test_validation_error_is_waypoint_error(self) -> None:
        assert issubclass(ValidationError, WaypointError)

    def test_async_error_is_configuration_error(self) -> None:
        assert issubclass(UnsupportedAsyncValidationError, ConfigurationError)

    def test_missing_param_is_waypoint_error(self) -> None:
        assert issubclass(MissingParamError, WaypointError)

    def test_discovery_error_is_waypoint_error(self) -> None:
        assert issubclass(RouteDiscoveryError, WaypointError)


class TestMessages:
    def test_validation_error(self) -> None:
        err = ValidationError("id", "Invalid id")
        assert err.key == "id"
        assert err.message == "Invalid id"
        assert err.kind == "param"
        assert str(err) == 'Validation failed for param "id": Invalid id'

    def test_validation_error_kind(self) -> None:
        err = ValidationError("page", "Must be a number", kind="search param")
        assert str(err) == 'Validation failed for search param "page": Must be a number'

    def test_async_error(self) -> None:
        err = UnsupportedAsyncValidationError("id")
        assert err.key == "id"
        assert str(err) == 'Async validation is not supported for param "id"'

    def test_missing_param(self) -> None:
        err = MissingParamError("slug", "/blog/[slug]")
        assert err.name == "slug"
        assert "slug" in str(err)
        assert "/blog/[slug]" in str(err)
