"""
Resolution of requested capabilities to concrete values.

A :class:`Resolver` consults a fixed chain of scopes, highest priority first:

1. the process-wide :class:`~ambit.singletons.PlatformSingletons`;
2. the plugin container owning the ``origin`` object, when one is given;
3. otherwise the active plugin of the execution context.

Only one of (2) and (3) is consulted for a request. The first scope with an
entry decides the result. Resolution never mutates any scope and caches
nothing, so a resolver can be shared between threads.
"""

import logging
from typing import Any, Optional, Protocol

from ambit.capability import Capability, Request
from ambit.context import ExecutionContext
from ambit.domain import Lookup, MISS
from ambit.errors import NotFoundError
from ambit.plugin import PluginContainer
from ambit.singletons import PlatformSingletons

__all__ = ["ContainerLookup", "Resolver"]

logger = logging.getLogger(__name__)


class ContainerLookup(Protocol):
    """Maps plugin-supplied objects back to the container that owns them."""

    def container_owning(self, obj: Any) -> Optional[PluginContainer]:
        ...


class Resolver:
    """Resolve capabilities against the singleton and plugin scopes.

    Args:
        singletons: The platform singletons.
        containers: Maps origin objects to their plugin containers, usually a
            :class:`~ambit.plugin.PluginContainerRegistry`.
    """

    def __init__(self, singletons: PlatformSingletons, containers: ContainerLookup):
        self._singletons = singletons
        self._containers = containers

    def resolve(
        self,
        request: Any,
        origin: Any = None,
        context: Optional[ExecutionContext] = None,
    ) -> Any:
        """Resolve a request to its value.

        Args:
            request: A :class:`Request`, or a bare :class:`Capability` which is
                treated as a non-nullable request.
            origin: The object asking for the value, typically a plugin
                instance. Takes precedence over the execution context.
            context: The execution context to read the active plugin from when
                no origin is given. Defaults to the ambient context of the
                calling thread or task.

        Returns:
            The resolved value, or ``None`` for a nullable request that no
            scope could satisfy.

        Raises:
            NotFoundError: If the request is not nullable and no scope produced
                a value other than ``None``.
        """
        request = Request.of(request)
        result = self.lookup(request, origin, context)
        if result.value is None and not request.nullable:
            logger.debug(
                "No value for %s (found=%s, origin=%r)",
                request.describe(),
                result.found,
                origin,
            )
            raise NotFoundError(request)
        return result.value

    def lookup(
        self,
        request: Any,
        origin: Any = None,
        context: Optional[ExecutionContext] = None,
    ) -> Lookup:
        """Walk the scope chain without applying the nullability rule.

        Returns:
            The :class:`Lookup` of the first scope that had an entry, or
            :data:`~ambit.domain.MISS`.
        """
        capability = Request.of(request).capability

        result = self._singletons.lookup(capability)
        if result.found:
            logger.debug("Resolved %s from platform singletons", capability)
            return result

        container = self._target_container(origin, context)
        if container is None:
            return MISS

        result = _lookup_in_container(container, capability)
        if result.found:
            logger.debug("Resolved %s from plugin %s", capability, container.plugin_id)
        return result

    def _target_container(
        self, origin: Any, context: Optional[ExecutionContext]
    ) -> Optional[PluginContainer]:
        if origin is not None:
            return self._containers.container_owning(origin)
        if context is None:
            context = ExecutionContext.current()
        return context.plugin_container


def _lookup_in_container(container: PluginContainer, capability: Any) -> Lookup:
    if capability is Capability.PLUGIN_CONTAINER:
        return Lookup.of(container)
    if capability is Capability.LOGGER:
        return Lookup.of(container.logger)
    if capability is Capability.NATIVE_LOGGER:
        return Lookup.of(container.native_logger)
    return MISS
