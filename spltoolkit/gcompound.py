"""Polygons and compound objects built from other graphical objects."""

from __future__ import annotations

import math
from typing import Iterator

from .gobjects import GObject
from .gtypes import GPoint, GRectangle


class GPolygon(GObject):
    """A polygon defined by a list of vertices.

    Vertices are added one at a time, either as absolute points or as
    edges relative to the most recently added vertex.
    """

    _TYPE_NAME = "GPolygon"
    _FILLABLE = True

    def __init__(self) -> None:
        super().__init__()
        self._vertices: list[GPoint] = []
        self._cx = 0.0
        self._cy = 0.0

    @property
    def vertices(self) -> list[GPoint]:
        """The polygon's vertices, in the order they were added."""
        return list(self._vertices)

    def add_vertex(self, x: float, y: float) -> None:
        """Add the vertex (x, y) and make it the current point."""
        self._cx = x
        self._cy = y
        self._vertices.append(GPoint(x, y))

    def add_edge(self, dx: float, dy: float) -> None:
        """Add a vertex displaced by (dx, dy) from the current point."""
        self.add_vertex(self._cx + dx, self._cy + dy)

    def add_polar_edge(self, r: float, theta: float) -> None:
        """Add an edge of length r at angle theta degrees from the current point."""
        radians = math.radians(theta)
        self.add_edge(r * math.cos(radians), -r * math.sin(radians))

    def get_bounds(self) -> GRectangle:
        if not self._vertices:
            return GRectangle(0.0, 0.0, 0.0, 0.0)
        xs = [pt.x for pt in self._vertices]
        ys = [pt.y for pt in self._vertices]
        x_min, y_min = min(xs), min(ys)
        return GRectangle(x_min, y_min, max(xs) - x_min, max(ys) - y_min)

    def contains(self, x: float, y: float) -> bool:
        """Return True if (x, y) is inside the polygon, by the even-odd rule."""
        points = self._vertices
        if len(points) < 2:
            return False
        n = len(points)
        if points[0] == points[-1]:
            n -= 1
        ring = points[1:n] + [points[0]]
        x0, y0 = points[0].x, points[0].y
        crossings = 0
        for point in ring:
            x1, y1 = point.x, point.y
            if (y0 > y) != (y1 > y) and x - x0 < (x1 - x0) * (y - y0) / (y1 - y0):
                crossings += 1
            x0, y0 = x1, y1
        return crossings % 2 == 1

    def __repr__(self) -> str:
        return f"GPolygon({self._vertices!r})"


class GCompound(GObject):
    """A group of graphical objects stored from back to front."""

    _TYPE_NAME = "GCompound"

    def __init__(self) -> None:
        super().__init__()
        self._contents: list[GObject] = []

    @property
    def contents(self) -> list[GObject]:
        """The objects in the compound, from back to front."""
        return list(self._contents)

    def add(self, gobj: GObject) -> None:
        """Add gobj in front of every object already in the compound."""
        self._contents.append(gobj)
        gobj.parent = self

    def remove(self, gobj: GObject) -> None:
        """Remove gobj from the compound; objects not present are ignored."""
        for index, item in enumerate(self._contents):
            if item is gobj:
                del self._contents[index]
                if gobj.parent is self:
                    gobj.parent = None
                return

    def get_object_at(self, x: float, y: float) -> GObject | None:
        """Return the frontmost object containing (x, y), or None."""
        return next(
            (gobj for gobj in reversed(self._contents) if gobj.contains(x, y)),
            None,
        )

    def __iter__(self) -> Iterator[GObject]:
        return iter(list(self._contents))

    def __len__(self) -> int:
        return len(self._contents)

    def __repr__(self) -> str:
        return f"GCompound({self._contents!r})"