"""Graphical objects: rectangles, ovals, lines and arcs with their geometry."""

from __future__ import annotations

import math

from .gtypes import GDimension, GPoint, GRectangle

LINE_TOLERANCE = 1.5
ARC_TOLERANCE = 2.5
DEFAULT_CORNER = 10


def _dsq(x0: float, y0: float, x1: float, y1: float) -> float:
    return (x1 - x0) ** 2 + (y1 - y0) ** 2


def _cos_degrees(angle: float) -> float:
    return math.cos(math.radians(angle))


def _sin_degrees(angle: float) -> float:
    return math.sin(math.radians(angle))


def _normalize_angle(angle: float) -> float:
    return 360 - math.fmod(-angle, 360) if angle < 0 else math.fmod(angle, 360)


class GObject:
    """The common base of all graphical objects.

    Every object has a location, a size, a color, an optional fill color
    and a visibility flag.  Subclasses refine how bounds and containment
    are computed.
    """

    _TYPE_NAME = "GObject"
    _RESIZABLE = False
    _FILLABLE = False

    def __init__(
        self, x: float = 0.0, y: float = 0.0, width: float = 0.0, height: float = 0.0
    ) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.color = "BLACK"
        self.fill_color: str | None = None
        self.visible = True
        self.parent: GObject | None = None
        self._filled = False

    @property
    def filled(self) -> bool:
        """Whether the object is drawn filled."""
        return self._filled

    def set_location(self, x: float, y: float) -> None:
        """Move the object's origin to (x, y)."""
        self.x = x
        self.y = y

    def move(self, dx: float, dy: float) -> None:
        """Shift the object by dx and dy."""
        self.set_location(self.x + dx, self.y + dy)

    def get_location(self) -> GPoint:
        """Return the object's origin."""
        return GPoint(self.x, self.y)

    def get_bounds(self) -> GRectangle:
        """Return the smallest rectangle enclosing the object."""
        return GRectangle(self.x, self.y, self.width, self.height)

    def get_size(self) -> GDimension:
        """Return the width and height of the object's bounds."""
        bounds = self.get_bounds()
        return GDimension(bounds.width, bounds.height)

    def contains(self, x: float, y: float) -> bool:
        """Return True if the point (x, y) lies inside the object."""
        return (
            self.x <= x <= self.x + self.width
            and self.y <= y <= self.y + self.height
        )

    def set_size(self, width: float, height: float) -> None:
        """Change the object's size; only some kinds of object allow it."""
        if not self._RESIZABLE:
            raise TypeError("setSize: Illegal GObject type")
        self.width = width
        self.height = height

    def set_bounds(self, x: float, y: float, width: float, height: float) -> None:
        """Change both the size and the location of the object."""
        self.set_size(width, height)
        self.set_location(x, y)

    def set_filled(self, flag: bool) -> None:
        """Set whether the object is filled; only shapes with area allow it."""
        if not self._FILLABLE:
            raise TypeError("setFilled: Illegal GObject type")
        self._filled = bool(flag)

    def type_name(self) -> str:
        """Return the name of the object's kind, such as ``"GRect"``."""
        return self._TYPE_NAME

    def __repr__(self) -> str:
        return (
            f"{self._TYPE_NAME}(x={self.x!r}, y={self.y!r}, "
            f"width={self.width!r}, height={self.height!r})"
        )


class GRect(GObject):
    """A rectangle."""

    _TYPE_NAME = "GRect"
    _RESIZABLE = True
    _FILLABLE = True

    def __init__(self, x: float, y: float, width: float, height: float) -> None:
        super().__init__(x, y, width, height)


class GRoundRect(GObject):
    """A rectangle with rounded corners."""

    _TYPE_NAME = "GRoundRect"
    _FILLABLE = True

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        corner: float = DEFAULT_CORNER,
    ) -> None:
        super().__init__(x, y, width, height)
        self.corner = corner


class G3DRect(GObject):
    """A rectangle drawn to look raised or sunken."""

    _TYPE_NAME = "G3DRect"
    _FILLABLE = True

    def __init__(
        self, x: float, y: float, width: float, height: float, raised: bool = False
    ) -> None:
        super().__init__(x, y, width, height)
        self.raised = raised


class GOval(GObject):
    """An ellipse inscribed in its bounding rectangle."""

    _TYPE_NAME = "GOval"
    _RESIZABLE = True
    _FILLABLE = True

    def __init__(self, x: float, y: float, width: float, height: float) -> None:
        super().__init__(x, y, width, height)

    def contains(self, x: float, y: float) -> bool:
        rx = self.width / 2
        ry = self.height / 2
        if rx == 0 or ry == 0:
            return False
        dx = x - (self.x + rx)
        dy = y - (self.y + ry)
        return (dx * dx) / (rx * rx) + (dy * dy) / (ry * ry) <= 1.0


class GLine(GObject):
    """A line segment; width and height hold the displacement to its end."""

    _TYPE_NAME = "GLine"

    def __init__(self, x0: float, y0: float, x1: float, y1: float) -> None:
        super().__init__(x0, y0, x1 - x0, y1 - y0)

    def set_start_point(self, x: float, y: float) -> None:
        """Move the start of the line, leaving the end where it is."""
        self.width += self.x - x
        self.height += self.y - y
        self.x = x
        self.y = y

    def set_end_point(self, x: float, y: float) -> None:
        """Move the end of the line, leaving the start where it is."""
        self.width = x - self.x
        self.height = y - self.y

    def get_start_point(self) -> GPoint:
        """Return the start of the line."""
        return GPoint(self.x, self.y)

    def get_end_point(self) -> GPoint:
        """Return the end of the line."""
        return GPoint(self.x + self.width, self.y + self.height)

    def get_bounds(self) -> GRectangle:
        return GRectangle(
            min(self.x, self.x + self.width),
            min(self.y, self.y + self.height),
            abs(self.width),
            abs(self.height),
        )

    def contains(self, x: float, y: float) -> bool:
        x0, y0 = self.x, self.y
        x1, y1 = x0 + self.width, y0 + self.height
        tsq = LINE_TOLERANCE * LINE_TOLERANCE
        if _dsq(x, y, x0, y0) < tsq or _dsq(x, y, x1, y1) < tsq:
            return True
        if not min(x0, x1) - LINE_TOLERANCE <= x <= max(x0, x1) + LINE_TOLERANCE:
            return False
        if not min(y0, y1) - LINE_TOLERANCE <= y <= max(y0, y1) + LINE_TOLERANCE:
            return False
        if x0 == x1 and y0 == y1:
            return False
        u = ((x - x0) * (x1 - x0) + (y - y0) * (y1 - y0)) / _dsq(x0, y0, x1, y1)
        return _dsq(x, y, x0 + u * (x1 - x0), y0 + u * (y1 - y0)) < tsq


class GArc(GObject):
    """An elliptical arc inside a frame rectangle.

    Angles are in degrees, measured counterclockwise from the positive
    x axis; a negative sweep runs clockwise.
    """

    _TYPE_NAME = "GArc"
    _FILLABLE = True

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        start: float,
        sweep: float,
    ) -> None:
        super().__init__(x, y, width, height)
        self.start = start
        self.sweep = sweep

    def set_frame_rectangle(
        self, x: float, y: float, width: float, height: float
    ) -> None:
        """Set the rectangle whose inscribed ellipse the arc follows."""
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def get_frame_rectangle(self) -> GRectangle:
        """Return the rectangle whose inscribed ellipse the arc follows."""
        return GRectangle(self.x, self.y, self.width, self.height)

    def _contains_angle(self, theta: float) -> bool:
        start = min(self.start, self.start + self.sweep)
        sweep = abs(self.sweep)
        if sweep >= 360:
            return True
        theta = _normalize_angle(theta)
        start = _normalize_angle(start)
        if start + sweep > 360:
            return theta >= start or theta <= start + sweep - 360
        return start <= theta <= start + sweep

    def get_bounds(self) -> GRectangle:
        rx = self.width / 2
        ry = self.height / 2
        cx = self.x + rx
        cy = self.y + ry
        end = self.start + self.sweep
        p1x = cx + _cos_degrees(self.start) * rx
        p1y = cy - _sin_degrees(self.start) * ry
        p2x = cx + _cos_degrees(end) * rx
        p2y = cy - _sin_degrees(end) * ry
        x_min, x_max = min(p1x, p2x), max(p1x, p2x)
        y_min, y_max = min(p1y, p2y), max(p1y, p2y)
        if self._contains_angle(0):
            x_max = cx + rx
        if self._contains_angle(90):
            y_min = cy - ry
        if self._contains_angle(180):
            x_min = cx - rx
        if self._contains_angle(270):
            y_max = cy + ry
        if self.filled:
            x_min = min(x_min, cx)
            y_min = min(y_min, cy)
            x_max = max(x_max, cx)
            y_max = max(y_max, cy)
        return GRectangle(x_min, y_min, x_max - x_min, y_max - y_min)

    def contains(self, x: float, y: float) -> bool:
        rx = self.width / 2
        ry = self.height / 2
        if rx == 0 or ry == 0:
            return False
        dx = x - (self.x + rx)
        dy = y - (self.y + ry)
        r = (dx * dx) / (rx * rx) + (dy * dy) / (ry * ry)
        if self.filled:
            if r > 1.0:
                return False
        elif abs(1.0 - r) > ARC_TOLERANCE / ((rx + ry) / 2):
            return False
        return self._contains_angle(math.degrees(math.atan2(-dy, dx)))