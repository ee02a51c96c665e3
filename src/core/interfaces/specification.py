"""Specification contract.

Why Protocol:
- A structural contract (duck typing) without rigid inheritance.
- New filtering criteria are new classes; the filter that consumes them is
  never edited (open for extension, closed for modification).
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class Specification(Protocol[T_contra]):
    """Predicate object over items of some type."""

    def is_satisfied(self, item: T_contra) -> bool:
        """Return True when `item` meets the criterion."""

        ...
