"""Ambit: contextual value resolution and string building for plugin hosts.

Ambit resolves the values a plugin asks for without the plugin passing
references around. A request names an abstract capability ("the event bus",
"my logger") and is answered from a fixed chain of scopes: process-wide
platform singletons first, then the plugin that owns the calling object, or
else the plugin active in the current execution context.

Basic Usage:
    >>> from ambit.capability import Capability, Request
    >>> from ambit.plugin import PluginContainer, PluginContainerRegistry
    >>> from ambit.resolver import Resolver
    >>> from ambit.singletons import PlatformSingletons
    >>>
    >>> containers = PluginContainerRegistry()
    >>> plugin = MyPlugin()
    >>> containers.register(PluginContainer("my-plugin", instance=plugin))
    >>> resolver = Resolver(PlatformSingletons(bus, proxy, manager, console, loop), containers)
    >>>
    >>> resolver.resolve(Capability.EVENT_BUS)                  # bus
    >>> resolver.resolve(Capability.LOGGER, origin=plugin)      # the plugin's logger
    >>> resolver.resolve(Request.optional(Capability.LOGGER))   # None outside plugin code

The package consists of:
    - capability: The requestable capabilities and the request type
    - resolver: The scope chain
    - context: The execution context and the ambient active-plugin marker
    - plugin: Plugin containers and object ownership
    - singletons: Process-wide platform objects
    - injection: Requests derived from type annotations
    - to_string: Deterministic string building for ``__repr__`` implementations
    - errors: Framework-specific exceptions
"""
