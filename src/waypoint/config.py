"""Route builder configuration.

RoutesConfig is a frozen dataclass — immutable after creation, shared by
every node of one route tree.
"""

from dataclasses import dataclass

from waypoint.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class RoutesConfig:
    """Rendering options for one route tree. Immutable after creation.

    All fields have permissive defaults. Override what you need::

        config = RoutesConfig(base_path="/app", strict_params=True)
    """

    # Prefix prepended to every rendered path (e.g. "/app")
    base_path: str = ""

    # Append "/" to every non-root path
    trailing_slash: bool = False

    # Raise MissingParamError instead of leaving "[name]" in the path
    strict_params: bool = False

    def __post_init__(self) -> None:
        if self.base_path and not self.base_path.startswith("/"):
            msg = f"base_path must start with '/', got {self.base_path!r}"
            raise ConfigurationError(msg)
        if self.base_path.endswith("/"):
            msg = f"base_path must not end with '/', got {self.base_path!r}"
            raise ConfigurationError(msg)
