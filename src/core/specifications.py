"""Concrete specifications over `Product`.

Every time we want to filter by some other attribute, we add a class here;
`SpecificationFilter` stays untouched.
"""

from __future__ import annotations

from core.domain.products import Color, Product, Size
from core.interfaces.specification import Specification


class _Combinable:
    def __and__(self, other: Specification[Product]) -> "AndSpecification":
        return AndSpecification(self, other)  # type: ignore[arg-type]


class ColorSpecification(_Combinable):
    def __init__(self, color: Color) -> None:
        self.color = Color(color)

    def is_satisfied(self, item: Product) -> bool:
        return item.color == self.color

    def __repr__(self) -> str:
        return f"ColorSpecification({self.color.value!r})"


class SizeSpecification(_Combinable):
    def __init__(self, size: Size) -> None:
        self.size = Size(size)

    def is_satisfied(self, item: Product) -> bool:
        return item.size == self.size

    def __repr__(self) -> str:
        return f"SizeSpecification({self.size.value!r})"


class AndSpecification(_Combinable):
    """Satisfied only when every wrapped specification is.

    Covers the "color *and* size" combinations that would otherwise need a
    new `filter_by_color_and_size` method for each pair.
    """

    def __init__(self, *specs: Specification[Product]) -> None:
        if not specs:
            raise ValueError("AndSpecification needs at least one specification")
        self.specs = tuple(specs)

    def is_satisfied(self, item: Product) -> bool:
        return all(spec.is_satisfied(item) for spec in self.specs)

    def __repr__(self) -> str:
        inner = ", ".join(repr(s) for s in self.specs)
        return f"AndSpecification({inner})"
