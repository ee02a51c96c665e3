"""Domain models for the three vignettes.

Why:
- Plain, strict data structures (Pydantic v2) for shapes, journals and products.
- The domain knows nothing about files, HTTP or the console.
"""

from core.domain.journal import Journal, JournalFormatError
from core.domain.products import Color, Product, Size
from core.domain.shapes import Rectangle, Square, StretchReport, stretch

__all__ = [
    "Color",
    "Journal",
    "JournalFormatError",
    "Product",
    "Rectangle",
    "Size",
    "Square",
    "StretchReport",
    "stretch",
]
