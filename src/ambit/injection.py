"""Injection driven by type annotations.

Plugin code declares what it needs with ordinary type hints; this module
translates them into :class:`~ambit.capability.Request` objects and resolves
them:

    >>> def on_enable(log: logging.LoggerAdapter, bus: EventBus, proxy: Optional[Proxy]):
    ...     ...
    >>> call_with_injection(resolver, on_enable, origin=plugin, table=table)

``Optional[X]`` (or ``X | None``) marks a nullable request.
``Annotated[X, Capability.Y]`` names the capability explicitly.
"""

import inspect
import logging
import types
from typing import Annotated, Any, Callable, Optional, Union, get_args, get_origin, get_type_hints

from ambit.capability import Capability, Request
from ambit.context import ExecutionContext
from ambit.errors import ResolutionError
from ambit.plugin import PluginContainer, PluginLogger
from ambit.resolver import Resolver

__all__ = [
    "TypeTable",
    "request_for",
    "inject",
    "resolve_arguments",
    "call_with_injection",
]

logger = logging.getLogger(__name__)

_SKIPPED_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


class TypeTable:
    """Maps declared Python types to capabilities.

    Lookups match the exact type, not its subclasses. A type without a
    binding maps to itself, which no scope can answer.
    """

    def __init__(self, bindings: Optional[dict[type, Capability]] = None):
        self._bindings = dict(bindings or {})

    @classmethod
    def default(cls) -> "TypeTable":
        """A table for the per-plugin capabilities.

        The host binds its own platform types on top with :meth:`bind`.
        """
        return cls(
            {
                PluginContainer: Capability.PLUGIN_CONTAINER,
                PluginLogger: Capability.LOGGER,
                logging.LoggerAdapter: Capability.LOGGER,
                logging.Logger: Capability.NATIVE_LOGGER,
            }
        )

    def bind(self, declared_type: type, capability: Capability) -> "TypeTable":
        self._bindings[declared_type] = capability
        return self

    def capability_for(self, declared_type: Any) -> Any:
        return self._bindings.get(declared_type, declared_type)


def request_for(annotation: Any, table: Optional[TypeTable] = None) -> Request:
    """Translate a type annotation into a request.

    Args:
        annotation: The declared type of an injection point.
        table: Type bindings to use, :meth:`TypeTable.default` if omitted.

    Returns:
        The request for the annotation.

    Raises:
        ResolutionError: If the annotation is a union of more than one type
            besides ``None``.

    Example:
        >>> request_for(Optional[logging.Logger])
        Request(capability=<Capability.NATIVE_LOGGER: 'native_logger'>, nullable=True)
    """
    if table is None:
        table = TypeTable.default()

    origin = get_origin(annotation)
    if origin is Annotated:
        base_type, *metadata = get_args(annotation)
        request = request_for(base_type, table)
        capability = next((m for m in metadata if isinstance(m, Capability)), None)
        if capability is None:
            return request
        return Request(capability, request.nullable)

    if origin is Union or origin is types.UnionType:
        candidates = [a for a in get_args(annotation) if a is not type(None)]
        if len(candidates) != 1:
            raise ResolutionError(f"{annotation} does not name a single injectable type")
        return Request.optional(request_for(candidates[0], table).capability)

    return Request(table.capability_for(annotation))


def inject(
    resolver: Resolver,
    annotation: Any,
    origin: Any = None,
    context: Optional[ExecutionContext] = None,
    table: Optional[TypeTable] = None,
) -> Any:
    """Resolve the value for a single declared type."""
    return resolver.resolve(request_for(annotation, table), origin, context)


def resolve_arguments(
    resolver: Resolver,
    func: Callable,
    origin: Any = None,
    context: Optional[ExecutionContext] = None,
    table: Optional[TypeTable] = None,
) -> dict[str, Any]:
    """Resolve keyword arguments for every annotated parameter of ``func``.

    Parameters that declare a default keep it when their request cannot be
    satisfied. ``*args`` and ``**kwargs`` are ignored. For a class, the
    parameters of its constructor are used.

    Args:
        resolver: The resolver to resolve with.
        func: A function or class.
        origin: Passed on to :meth:`Resolver.resolve`.
        context: Passed on to :meth:`Resolver.resolve`.
        table: Type bindings, :meth:`TypeTable.default` if omitted.

    Returns:
        Mapping of parameter names to resolved values.

    Raises:
        ResolutionError: If a parameter without a default is not annotated.
        NotFoundError: If a parameter without a default cannot be resolved.
    """
    if table is None:
        table = TypeTable.default()

    sig = inspect.signature(func)
    hints = get_type_hints(func.__init__ if inspect.isclass(func) else func, include_extras=True)

    kwargs = {}
    for name, parameter in sig.parameters.items():
        if parameter.kind in _SKIPPED_KINDS:
            continue
        has_default = parameter.default is not inspect.Parameter.empty
        annotation = hints.get(name)
        if annotation is None:
            if has_default:
                continue
            raise ResolutionError(
                f"Parameter {name} of {func.__qualname__} is not annotated"
            )

        request = request_for(annotation, table)
        if not has_default:
            kwargs[name] = resolver.resolve(request, origin, context)
            continue

        result = resolver.lookup(request, origin, context)
        if result.found and (result.value is not None or request.nullable):
            kwargs[name] = result.value

    logger.debug("Resolved %s for %s", sorted(kwargs), func.__qualname__)
    return kwargs


def call_with_injection(
    resolver: Resolver,
    func: Callable,
    origin: Any = None,
    context: Optional[ExecutionContext] = None,
    table: Optional[TypeTable] = None,
) -> Any:
    """Call ``func`` with all of its injectable arguments resolved."""
    return func(**resolve_arguments(resolver, func, origin, context, table))
