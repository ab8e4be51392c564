"""Deterministic, human-readable string forms for objects with properties.

:class:`ToStringHelper` collects an ordered sequence of named and unnamed
values and renders them as ``Name(key=value, ...)``. It is meant to be built
and rendered within a single ``__repr__`` or ``__str__`` call.

Example:
    >>> class Point:
    ...     def __init__(self, x, y):
    ...         self.x, self.y = x, y
    ...     def __repr__(self):
    ...         return to_string(self, lambda h: h.add("x", self.x).add("y", self.y))
    >>> repr(Point(1, 2))
    'Point(x=1, y=2)'
"""

import enum
from collections import deque
from collections.abc import Collection, Mapping
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional

__all__ = ["Brackets", "ToStringStyle", "ToStringHelper", "canonical_text", "to_string"]

_QUOTED_CHARS = (",", " ")
_TEXT_TYPES = (str, bytes, bytearray)


class Brackets(enum.Enum):
    """The brackets that enclose the rendered entries."""

    ROUND = ("(", ")")
    CURLY = ("{", "}")
    SQUARE = ("[", "]")

    @property
    def open(self) -> str:
        return self.value[0]

    @property
    def close(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class ToStringStyle:
    """Formatting options of a :class:`ToStringHelper`.

    Attributes:
        brackets: The brackets that are added around the joined entries.
        omit_null_values: Whether entries with a ``None`` value are left out.
        name_value_separator: Joins a key with its value.
        entry_separator: Joins consecutive entries.
    """

    brackets: Brackets = Brackets.ROUND
    omit_null_values: bool = False
    name_value_separator: str = "="
    entry_separator: str = ", "


@dataclass(frozen=True)
class _Entry:
    key: Optional[str]
    value: Any


def canonical_text(value: Any) -> str:
    """Return the canonical display text of a value.

    ``None`` and booleans use lowercase literals, mappings render as
    ``{key=value, ...}`` and any other finite collection as ``[a, b, ...]``,
    recursively. Text and everything else use ``str``.

    Args:
        value: Any value, including ``None``.

    Returns:
        The display text. A collection that contains itself renders the inner
        reference as ``(this collection)``.

    Example:
        >>> canonical_text([1, None, ("a", True)])
        '[1, null, [a, true]]'
        >>> canonical_text({"k": [1, 2]})
        '{k=[1, 2]}'
    """
    return _canonical_text(value, frozenset())


def _canonical_text(value: Any, enclosing: frozenset) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, _TEXT_TYPES):
        return str(value)
    if isinstance(value, Mapping):
        if id(value) in enclosing:
            return "(this collection)"
        inner = enclosing | {id(value)}
        return "{%s}" % ", ".join(
            f"{_canonical_text(k, inner)}={_canonical_text(v, inner)}"
            for k, v in value.items()
        )
    if isinstance(value, Collection):
        if id(value) in enclosing:
            return "(this collection)"
        inner = enclosing | {id(value)}
        return "[%s]" % ", ".join(_canonical_text(item, inner) for item in value)
    return str(value)


def default_name(target: Any) -> str:
    """Derive the display name for a class or an instance.

    Nested classes keep their enclosing class names (``Outer.Inner``); the
    function scope of locally defined classes is dropped.
    """
    cls = target if isinstance(target, type) else type(target)
    return cls.__qualname__.rpartition("<locals>.")[2]


class ToStringHelper:
    """Builds the string form of an object from an ordered list of entries.

    Entries are either key-value pairs or bare values. They render in the
    order they were appended, except that :meth:`add_first` puts an entry in
    front of everything added so far.

    All mutators return the helper so calls can be chained:

        >>> ToStringHelper("User").add("name", "Arthur").add("age", 42).render()
        'User(name=Arthur, age=42)'

    Instances are not thread safe.
    """

    def __init__(self, name: str = "", style: Optional[ToStringStyle] = None):
        self._name = name
        self._style = style or ToStringStyle()
        self._entries: deque[_Entry] = deque()

    @classmethod
    def create(cls, target: Any = "") -> "ToStringHelper":
        """Create a helper named after a string, a class or an instance."""
        if isinstance(target, str):
            return cls(target)
        return cls(default_name(target))

    @property
    def name(self) -> str:
        return self._name

    @property
    def style(self) -> ToStringStyle:
        return self._style

    def __call__(self, fn: Callable[["ToStringHelper"], Any]) -> "ToStringHelper":
        fn(self)
        return self

    def __setitem__(self, key: str, value: Any) -> None:
        self.add(key, value)

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, key: str, value: Any) -> "ToStringHelper":
        self._entries.append(_Entry(key, value))
        return self

    def add_value(self, value: Any) -> "ToStringHelper":
        self._entries.append(_Entry(None, value))
        return self

    def add_first(self, key: str, value: Any) -> "ToStringHelper":
        """Add a key-value pair in front of all entries added so far."""
        self._entries.appendleft(_Entry(key, value))
        return self

    def add_first_value(self, value: Any) -> "ToStringHelper":
        """Add a value without a key in front of all entries added so far."""
        self._entries.appendleft(_Entry(None, value))
        return self

    def omit_null_values(self, omit: bool = True) -> "ToStringHelper":
        self._style = replace(self._style, omit_null_values=omit)
        return self

    def brackets(self, brackets: Brackets) -> "ToStringHelper":
        self._style = replace(self._style, brackets=brackets)
        return self

    def entry_separator(self, entry_separator: str) -> "ToStringHelper":
        self._style = replace(self._style, entry_separator=entry_separator)
        return self

    def name_value_separator(self, name_value_separator: str) -> "ToStringHelper":
        self._style = replace(self._style, name_value_separator=name_value_separator)
        return self

    def render(self) -> str:
        """Render the name, the bracketed entries and nothing else.

        Entries whose value is ``None`` are skipped when null values are
        omitted. A value whose text contains a comma or a space is wrapped in
        single quotes.

        Returns:
            The rendered string. Rendering does not change the helper.
        """
        style = self._style
        parts = []
        for entry in self._entries:
            if style.omit_null_values and entry.value is None:
                continue
            text = canonical_text(entry.value)
            if any(c in text for c in _QUOTED_CHARS):
                text = f"'{text}'"
            if entry.key is not None:
                text = f"{entry.key}{style.name_value_separator}{text}"
            parts.append(text)
        return (
            self._name
            + style.brackets.open
            + style.entry_separator.join(parts)
            + style.brackets.close
        )

    def __str__(self) -> str:
        return self.render()


def to_string(target: Any, fn: Callable[[ToStringHelper], Any]) -> str:
    """Build the string form of ``target`` in one call.

    Args:
        target: A name, a class or the object being described.
        fn: Called once with a fresh helper to add entries and adjust the style.

    Returns:
        The rendered string.
    """
    return ToStringHelper.create(target)(fn).render()
