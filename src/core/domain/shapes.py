"""Shapes: the Liskov Substitution vignette.

Code written for a `Rectangle` should keep working when handed a `Square`.
This module shows how a "clever" `Square` breaks that promise:

- `Rectangle` exposes `set_width` / `set_height`, each touching one side.
- `Square` overrides both setters so that either one sets *both* sides.
- `stretch` doubles width and height through the setters. For a rectangle
  the area grows 4x; for the square the sides are doubled twice and the
  area grows 16x.

Note:
- Direct attribute assignment (`sq.width = 10`) is still allowed and skips
  the coupling entirely, which is the first hint that subclassing here is
  the wrong tool.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

logger = logging.getLogger(__name__)


class Rectangle(BaseModel):
    """Axis-aligned rectangle with integer sides."""

    model_config = ConfigDict(validate_assignment=True)

    width: int = Field(
        ...,
        ge=0,
        description="Horizontal side length.",
    )
    height: int = Field(
        ...,
        ge=0,
        description="Vertical side length.",
    )

    def __init__(self, width: int, height: int, **data) -> None:
        super().__init__(width=width, height=height, **data)

    @property
    def area(self) -> int:
        return self.width * self.height

    def set_width(self, value: int) -> None:
        self.width = value

    def set_height(self, value: int) -> None:
        self.height = value

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


class Square(Rectangle):
    """A rectangle whose setters keep both sides equal.

    Why it exists:
    - It is the subtype that *looks* correct in isolation but violates the
      base contract (`set_width` must not change the height).
    """

    def __init__(self, size: int = 0, **data) -> None:
        super().__init__(size, size, **data)

    def set_width(self, value: int) -> None:
        self.width = self.height = value

    def set_height(self, value: int) -> None:
        self.width = self.height = value


class StretchReport(BaseModel):
    """Outcome of `stretch`: what the caller expected vs what happened."""

    shape: str = Field(..., description="Rendered shape after stretching (WxH).")
    original_area: int = Field(..., ge=0)
    expected_area: int = Field(..., ge=0)
    actual_area: int = Field(..., ge=0)

    @property
    def holds(self) -> bool:
        """True when the shape behaved like a rectangle."""

        return self.expected_area == self.actual_area


def stretch(rect: Rectangle) -> StretchReport:
    """Double width and height through the rectangle's setters.

    The caller only knows the `Rectangle` contract, so it expects the area to
    grow by a factor of 4.
    """

    original_area = rect.area
    rect.set_width(rect.width * 2)
    rect.set_height(rect.height * 2)

    report = StretchReport(
        shape=str(rect),
        original_area=original_area,
        expected_area=4 * original_area,
        actual_area=rect.area,
    )
    if not report.holds:
        logger.debug(
            "stretch broke substitution for %s: expected %d, got %d",
            type(rect).__name__,
            report.expected_area,
            report.actual_area,
        )
    return report
