"""Capabilities that can be requested from a :class:`~ambit.resolver.Resolver`."""

import enum
from dataclasses import dataclass
from typing import Any

__all__ = ["Capability", "Request"]


class Capability(enum.Enum):
    """The closed set of abstract values a resolver knows how to produce.

    The first group is bound once per process in
    :class:`~ambit.singletons.PlatformSingletons`; the second group is answered
    by the plugin container in scope.
    """

    EVENT_BUS = "event_bus"
    PROXY = "proxy"
    PLUGIN_MANAGER = "plugin_manager"
    CONSOLE = "console"
    DISPATCHER = "dispatcher"

    PLUGIN_CONTAINER = "plugin_container"
    LOGGER = "logger"
    NATIVE_LOGGER = "native_logger"

    @property
    def is_singleton(self) -> bool:
        return self in _SINGLETONS


_SINGLETONS = frozenset(
    {
        Capability.EVENT_BUS,
        Capability.PROXY,
        Capability.PLUGIN_MANAGER,
        Capability.CONSOLE,
        Capability.DISPATCHER,
    }
)


@dataclass(frozen=True)
class Request:
    """Describes a single injection point.

    Attributes:
        capability: The requested capability. Anything that is not a
            :class:`Capability` is accepted but never matches a scope.
        nullable: Whether ``None`` is an acceptable result.
    """

    capability: Any
    nullable: bool = False

    @classmethod
    def of(cls, request: Any) -> "Request":
        """Wrap a bare capability in a non-nullable request; pass requests through."""
        if isinstance(request, Request):
            return request
        return cls(request)

    @classmethod
    def optional(cls, capability: Any) -> "Request":
        return cls(capability, True)

    @property
    def is_supported(self) -> bool:
        return isinstance(self.capability, Capability)

    def describe(self) -> str:
        if isinstance(self.capability, Capability):
            return self.capability.value
        if isinstance(self.capability, type):
            return f"{self.capability.__module__}.{self.capability.__qualname__}"
        return repr(self.capability)
