"""
DocTemplates: Prototype capability.

Anything that can produce an independent copy of itself implements
``clone()``. The copy must share no mutable state with its source:
nested entities and containers are freshly allocated, scalars are equal.
"""

from __future__ import annotations

from typing import Protocol, Self, runtime_checkable


@runtime_checkable
class Prototype(Protocol):
    def clone(self) -> Self:
        """Return a deep, independent copy of this instance."""
        ...
