import math

import pytest

from rapidgeom.cad_types import Point, Size, Vector
from rapidgeom.line import Line
from rapidgeom.shapes import Circle, Ellipse, Polygon


def test_circle_derived_state():
    circle = Circle(Point(1, 1), 2)
    assert circle.diameter == 4.0
    assert circle.size == Size(4.0, 4.0)
    box = circle.bounding_box
    assert (box.x_min, box.x_max, box.y_min, box.y_max) == (-1, 3, -1, 3)


def test_circle_transforms():
    circle = Circle(Point(1, 1), 2)
    circle.rotate(math.pi / 2)
    assert circle.center == Point(-1, 1)
    assert circle.radius == 2.0

    circle.reflect(Line(Point(0, 0), Point(0, 1)))
    assert circle.center == Point(1, 1)

    circle.scale(-2)
    assert circle.center == Point(-2, -2)
    assert circle.radius == 4.0
    assert circle.diameter == 8.0


def test_ellipse_derived_state():
    ellipse = Ellipse(Point(-1, 2), 3, 1)
    assert ellipse.size == Size(6.0, 2.0)
    box = ellipse.bounding_box
    assert (box.x_min, box.x_max, box.y_min, box.y_max) == (-4, 2, 1, 3)

    ellipse.scale(0.5, Point(-1, 2))
    assert (ellipse.rx, ellipse.ry) == (1.5, 0.5)
    assert ellipse.size == Size(3.0, 1.0)
    assert ellipse.center == Point(-1, 2)


def test_ellipse_translate():
    ellipse = Ellipse(Point(0, 0), 3, 1).translate(Vector(1, 1))
    assert ellipse.bounding_box.x_max == 4.0


def test_polygon():
    polygon = Polygon(Point(0, 0), Point(4, 0), Point(4, 3))
    assert polygon.sides == 3
    assert polygon.size == Size(4.0, 3.0)
    assert polygon.values[2] == Point(4, 3)
    assert polygon.vectors == []

    polygon.rotate(math.pi, Point(2, 0))
    assert polygon.points[1] == Point(0, 0)
    assert polygon.points[2] == Point(0, -3)


def test_polygon_validates_vertices():
    with pytest.raises(ValueError):
        Polygon(Point(0, 0), Point(1, 1))
    with pytest.raises(TypeError):
        Polygon(Point(0, 0), Point(1, 1), (2, 0))


def test_shape_values_round_trip():
    assert Circle.from_values(Circle(Point(1, 2), 3).values).radius == 3.0
    ellipse = Ellipse.from_values(Ellipse(Point(1, 2), 3, 4).values)
    assert (ellipse.rx, ellipse.ry) == (3.0, 4.0)
    with pytest.raises(ValueError):
        Circle.from_values((Point(0, 0),))
