"""Domain models used throughout the framework."""

from dataclasses import dataclass
from typing import Any

__all__ = ["Lookup", "MISS"]


@dataclass(frozen=True)
class Lookup:
    """
    The outcome of consulting one scope for a capability.

    Keeps "the scope has no entry" apart from "the scope has an entry whose
    value is ``None``".

    Attributes:
        found: Whether the scope had an entry for the capability.
        value: The bound value. Always ``None`` when nothing was found.
    """

    found: bool
    value: Any = None

    @classmethod
    def of(cls, value: Any) -> "Lookup":
        """A found lookup bound to ``value``, which may be ``None``."""
        return cls(True, value)


MISS = Lookup(False)
"""The lookup result of a scope without an entry."""
