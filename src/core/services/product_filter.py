"""Product filters: before and after the Specification pattern.

`ProductFilter` is the version that does not scale: each new criterion (or
combination of criteria) means editing the class. `SpecificationFilter` takes
any `Specification` and never needs to change.
"""

from __future__ import annotations

from typing import Iterable, Iterator, TypeVar

from core.domain.products import Color, Product, Size
from core.interfaces.specification import Specification

T = TypeVar("T")


class ProductFilter:
    """Ad-hoc filter: one method per attribute."""

    def filter_by_color(self, products: Iterable[Product], color: Color) -> list[Product]:
        return [p for p in products if p.color == color]

    # assume this method isn't here yet when the first requirement lands
    def filter_by_size(self, products: Iterable[Product], size: Size) -> list[Product]:
        return [p for p in products if p.size == size]


class SpecificationFilter:
    """Generic filter driven by a `Specification`."""

    def filter(self, items: Iterable[T], spec: Specification[T]) -> Iterator[T]:
        for item in items:
            if spec.is_satisfied(item):
                yield item
