"""Products for the Open/Closed vignette."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Color(str, Enum):
    """Closed set of product colors."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"


class Size(str, Enum):
    """Closed set of product sizes."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class Product(BaseModel):
    """An item in the (toy) e-commerce catalogue."""

    name: str = Field(..., min_length=1, max_length=128)
    color: Color
    size: Size

    def __str__(self) -> str:
        return f"{self.name} ({self.color.value}, {self.size.value})"


def sample_catalogue() -> list[Product]:
    """The three products every demo filters over."""

    return [
        Product(name="Book", color=Color.RED, size=Size.SMALL),
        Product(name="laptop", color=Color.BLUE, size=Size.MEDIUM),
        Product(name="Surfboard", color=Color.GREEN, size=Size.LARGE),
    ]
