"""The execution context a resolution runs in.

The context tells the resolver which plugin, if any, is executing when no
origin object is supplied. It can be passed to
:meth:`~ambit.resolver.Resolver.resolve` explicitly, or captured from the
ambient marker that code entering a plugin sets with :func:`entering`:

    >>> with entering(container):
    ...     resolver.resolve(Capability.LOGGER)   # the container's logger
"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Iterator, Optional

from ambit.plugin import PluginContainer

__all__ = ["ExecutionContext", "active_plugin", "entering"]

_active_plugin: ContextVar[Optional[PluginContainer]] = ContextVar(
    "ambit_active_plugin", default=None
)


@dataclass(frozen=True)
class ExecutionContext:
    """Carries the plugin currently executing, if any.

    Attributes:
        active_plugin: The active plugin. Values that are not a
            :class:`PluginContainer` are treated as no active plugin.
    """

    active_plugin: Any = None

    @classmethod
    def current(cls) -> "ExecutionContext":
        """Snapshot the ambient marker of the calling thread or task."""
        return cls(_active_plugin.get())

    @property
    def plugin_container(self) -> Optional[PluginContainer]:
        if isinstance(self.active_plugin, PluginContainer):
            return self.active_plugin
        return None


def active_plugin() -> Optional[PluginContainer]:
    return _active_plugin.get()


@contextmanager
def entering(container: Optional[PluginContainer]) -> Iterator[ExecutionContext]:
    """Mark ``container`` as the active plugin for the enclosed block.

    The previous marker is restored on exit, so blocks may nest. Passing
    ``None`` runs the block as platform code.
    """
    token = _active_plugin.set(container)
    try:
        yield ExecutionContext(container)
    finally:
        _active_plugin.reset(token)
