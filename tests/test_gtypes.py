import dataclasses

import pytest

from spltoolkit.gtypes import GDimension, GPoint, GRectangle


def test_point_coordinates():
    origin = GPoint(0, 0)
    pt = GPoint(2, 3)
    assert origin.x == 0.0
    assert origin.y == 0.0
    assert pt.x == 2.0
    assert pt.y == 3.0


def test_dimension_fields():
    dim = GDimension(3, 1)
    assert dim.width == 3.0
    assert dim.height == 1.0


def test_rectangle_fields():
    r = GRectangle(1, 2, 3, 4)
    assert (r.x, r.y, r.width, r.height) == (1.0, 2.0, 3.0, 4.0)


def test_rectangle_not_empty():
    assert GRectangle(1, 2, 3, 4).is_empty() is False


@pytest.mark.parametrize("width, height", [(0, 4), (3, 0), (-1, 4), (3, -2)])
def test_rectangle_empty_when_no_area(width, height):
    assert GRectangle(1, 2, width, height).is_empty() is True


def test_rectangle_contains():
    r = GRectangle(1, 2, 3, 4)
    assert r.contains(GPoint(0, 0)) is False
    assert r.contains(GPoint(2, 3)) is True


def test_rectangle_contains_origin_corner_but_not_far_edges():
    r = GRectangle(1, 2, 3, 4)
    assert r.contains(GPoint(r.x, r.y)) is True
    assert r.contains(GPoint(r.x + r.width, r.y)) is False
    assert r.contains(GPoint(r.x, r.y + r.height)) is False


def test_values_are_immutable_and_comparable():
    p = GPoint(2, 3)
    assert p == GPoint(2, 3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 5