"""Vignette walkthroughs.

Each function runs one lesson top to bottom and returns what happened as
plain data. Printing stays in the CLI layer, so the same walkthroughs are
reusable from tests or any other entry point.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from adapters.persistence import PersistenceManager
from core.domain.journal import Journal
from core.domain.products import Color, Product, Size, sample_catalogue
from core.domain.shapes import Rectangle, Square, StretchReport, stretch
from core.services.product_filter import ProductFilter, SpecificationFilter
from core.specifications import ColorSpecification, SizeSpecification


@dataclass
class LiskovResult:
    """Everything the rectangle/square walkthrough observed."""

    rectangle: str
    square: str
    mutated_square: str
    coupled_square_area: int
    stretches: list[tuple[str, StretchReport]] = field(default_factory=list)


@dataclass
class JournalResult:
    journal: Journal
    saved_to: Path


@dataclass
class OpenClosedResult:
    products: list[Product]
    red_by_method: list[Product]
    green_by_spec: list[Product]
    large_green_by_spec: list[Product]


def run_liskov() -> LiskovResult:
    rc = Rectangle(10, 20)

    sq = Square(5)
    square = str(sq)
    # nothing stops a caller from breaking the square directly
    sq.width = 10
    mutated = str(sq)

    sq2 = Square()
    sq2.set_width(10)

    stretches = [
        ("Rectangle(11, 5)", stretch(Rectangle(11, 5))),
        ("Square(10)", stretch(Square(10))),
    ]

    return LiskovResult(
        rectangle=str(rc),
        square=square,
        mutated_square=mutated,
        coupled_square_area=sq2.area,
        stretches=stretches,
    )


def run_single_responsibility(
    output_path: Path,
    *,
    manager: PersistenceManager | None = None,
    entries: tuple[str, ...] = ("Today was a great day!", "I made a new friend today"),
) -> JournalResult:
    """Fill a journal and hand it to a persistence helper that doesn't know journals."""

    journal = Journal()
    for text in entries:
        journal.add_entry(text)

    manager = manager or PersistenceManager()
    saved_to = manager.save_to_file(journal, output_path)
    return JournalResult(journal=journal, saved_to=saved_to)


def run_open_closed(
    products: list[Product] | None = None,
    *,
    on_step: Callable[[str], None] | None = None,
) -> OpenClosedResult:
    products = products if products is not None else sample_catalogue()

    red = ProductFilter().filter_by_color(products, Color.RED)
    if on_step:
        on_step("ProductFilter.filter_by_color(red)")

    better = SpecificationFilter()
    greens = list(better.filter(products, ColorSpecification(Color.GREEN)))
    if on_step:
        on_step("SpecificationFilter.filter(ColorSpecification(green))")

    large_green = list(
        better.filter(products, ColorSpecification(Color.GREEN) & SizeSpecification(Size.LARGE))
    )
    if on_step:
        on_step("SpecificationFilter.filter(green & large)")

    return OpenClosedResult(
        products=products,
        red_by_method=red,
        green_by_spec=greens,
        large_green_by_spec=large_green,
    )
