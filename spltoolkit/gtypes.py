"""Simple geometric value types: points, dimensions and rectangles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GPoint:
    """A location given by its x and y coordinates."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class GDimension:
    """A size given by a width and a height."""

    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class GRectangle:
    """An axis-aligned rectangle given by its origin and its size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def is_empty(self) -> bool:
        """Return True if the rectangle has no positive area."""
        return self.width <= 0 or self.height <= 0

    def contains(self, pt: GPoint) -> bool:
        """Return True if the point lies inside the rectangle.

        The left and top edges belong to the rectangle; the right and
        bottom edges do not.
        """
        return (
            self.x <= pt.x < self.x + self.width
            and self.y <= pt.y < self.y + self.height
        )