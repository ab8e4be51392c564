"""Plugin containers and the registry that maps objects back to them."""

import logging
from typing import Any, Optional

from ambit.errors import ResolutionError
from ambit.to_string import to_string

__all__ = ["PluginContainer", "PluginContainerRegistry", "PluginLogger"]

logger = logging.getLogger(__name__)


class PluginLogger(logging.LoggerAdapter):
    """A logger adapter that tags records with the plugin they come from.

    Fields passed with ``extra=`` on a call are kept; the plugin fields win
    when a key clashes.
    """

    def process(self, msg, kwargs):
        kwargs["extra"] = {**(kwargs.get("extra") or {}), **self.extra}
        return msg, kwargs


class PluginContainer:
    """A loaded plugin together with the values bound to it.

    Attributes:
        plugin_id: Unique id of the plugin.
        name: Display name, defaults to the id.
        version: Optional version string.
        instance: The plugin object itself, once constructed.
        native_logger: The platform logger named after the plugin.
        logger: A structured logger that tags every record with the plugin id.
    """

    def __init__(
        self,
        plugin_id: str,
        name: Optional[str] = None,
        version: Optional[str] = None,
        instance: Any = None,
    ):
        self.plugin_id = plugin_id
        self.name = name or plugin_id
        self.version = version
        self.instance = instance
        self.native_logger = logging.getLogger(f"ambit.plugin.{plugin_id}")
        self.logger = PluginLogger(self.native_logger, {"plugin": plugin_id})

    def __repr__(self):
        return to_string(
            self,
            lambda h: h.add("id", self.plugin_id)
            .add("name", self.name)
            .add("version", self.version)
            .omit_null_values(),
        )


class PluginContainerRegistry:
    """Tracks which plugin container owns which object.

    Ownership is keyed on object identity, so owned objects need not be
    hashable. The registry keeps owned objects alive for as long as they are
    registered.
    """

    def __init__(self):
        self._containers: dict[str, PluginContainer] = {}
        self._owners: dict[int, tuple[Any, PluginContainer]] = {}

    def register(self, container: PluginContainer, *owned: Any) -> PluginContainer:
        """Register a container and the objects it owns.

        The container's plugin instance, if set, is always owned by it.

        Args:
            container: The container to register.
            *owned: Further objects created by, or on behalf of, the plugin.

        Returns:
            The registered container.

        Raises:
            ResolutionError: If another container is registered under the same
                plugin id, or an object is already owned by another container.
        """
        registered = self._containers.get(container.plugin_id)
        if registered is not None and registered is not container:
            raise ResolutionError(f"Plugin {container.plugin_id} is already registered")

        objects = list(owned)
        if container.instance is not None:
            objects.insert(0, container.instance)

        for obj in objects:
            entry = self._owners.get(id(obj))
            if entry is not None and entry[1] is not container:
                raise ResolutionError(
                    f"{obj!r} is already owned by plugin {entry[1].plugin_id}"
                )

        self._containers[container.plugin_id] = container
        for obj in objects:
            self._owners[id(obj)] = (obj, container)
        logger.debug("Registered %r owning %d object(s)", container, len(objects))
        return container

    def containers(self) -> list[PluginContainer]:
        return list(self._containers.values())

    def container_owning(self, obj: Any) -> Optional[PluginContainer]:
        """Return the container that owns ``obj``, or ``None`` if it is unowned.

        A container is considered to own itself.
        """
        if isinstance(obj, PluginContainer) and self._containers.get(obj.plugin_id) is obj:
            return obj
        entry = self._owners.get(id(obj))
        if entry is None or entry[0] is not obj:
            return None
        return entry[1]
