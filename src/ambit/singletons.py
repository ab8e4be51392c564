"""Process-wide platform objects."""

from dataclasses import dataclass
from typing import Any

from ambit.capability import Capability
from ambit.domain import Lookup, MISS

__all__ = ["PlatformSingletons"]


@dataclass(frozen=True)
class PlatformSingletons:
    """The platform objects bound once for the lifetime of the process.

    Every singleton :class:`~ambit.capability.Capability` has exactly one
    field here. Create one instance at start-up and hand it to the resolver.
    """

    event_bus: Any
    proxy: Any
    plugin_manager: Any
    console: Any
    dispatcher: Any

    def lookup(self, capability: Any) -> Lookup:
        """Look up a singleton capability.

        Returns:
            A found :class:`Lookup` for singleton capabilities, :data:`MISS`
            for anything else.
        """
        if not isinstance(capability, Capability) or not capability.is_singleton:
            return MISS
        return Lookup.of(getattr(self, capability.value))
