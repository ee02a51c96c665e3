"""Interfaces/abstractions of the Core.

Why:
- Defines contracts (Protocol) that concrete classes implement.
- Consumers (filters, persistence) depend on these, not on concrete types.
"""

from core.interfaces.persistable import Persistable
from core.interfaces.specification import Specification

__all__ = ["Persistable", "Specification"]
