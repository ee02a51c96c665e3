"""Contract for anything the persistence helpers can store.

All the persistence side needs is a text rendering, so any object with a
meaningful `__str__` qualifies: journals today, something else tomorrow.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Persistable(Protocol):
    def __str__(self) -> str:
        ...
