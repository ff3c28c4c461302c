"""
Closed shapes with closed-form extents: circle, axis-aligned ellipse and polygon.
"""

from typing import Optional, Tuple

from rapidgeom.cad_types import BoundingBox, Point, Size
from rapidgeom.constants import CIRCLE_ARITY, ELLIPSE_ARITY, MIN_POLYGON_SIDES
from rapidgeom.figure import Figure, Recomputable


class Circle(Figure, Recomputable):
    arity = CIRCLE_ARITY

    def __init__(self, center: Point, radius: float):
        super().__init__()
        self._set_controls(center, [])
        self.radius = float(radius)
        self.diameter = 0.0
        self.size = Size(0.0, 0.0)
        self.recompute()

    @property
    def center(self) -> Point:
        return self.points[0]

    @property
    def values(self) -> Tuple[Point, float]:
        return (self.center, self.radius)

    @property
    def bounding_box(self) -> BoundingBox:
        return BoundingBox(
            x_min=self.center.x - self.radius,
            x_max=self.center.x + self.radius,
            y_min=self.center.y - self.radius,
            y_max=self.center.y + self.radius,
        )

    def recompute(self) -> None:
        self.diameter = self.radius * 2
        self.size = Size(self.diameter, self.diameter)

    def scale(
        self, factor: float, about: Optional[Point] = None, recompute: bool = True
    ) -> "Circle":
        super().scale(factor, about, recompute=False)
        self.radius *= abs(factor)
        if recompute:
            self.recompute()
        return self

    def clone(self) -> "Circle":
        return Circle(*self.values)


class Ellipse(Figure, Recomputable):
    """An ellipse whose radii stay aligned with the coordinate axes."""

    arity = ELLIPSE_ARITY

    def __init__(self, center: Point, rx: float, ry: float):
        super().__init__()
        self._set_controls(center, [])
        self.rx = float(rx)
        self.ry = float(ry)
        self.size = Size(0.0, 0.0)
        self.recompute()

    @property
    def center(self) -> Point:
        return self.points[0]

    @property
    def values(self) -> Tuple[Point, float, float]:
        return (self.center, self.rx, self.ry)

    @property
    def bounding_box(self) -> BoundingBox:
        return BoundingBox(
            x_min=self.center.x - self.rx,
            x_max=self.center.x + self.rx,
            y_min=self.center.y - self.ry,
            y_max=self.center.y + self.ry,
        )

    def recompute(self) -> None:
        self.size = Size(self.rx * 2, self.ry * 2)

    def scale(
        self, factor: float, about: Optional[Point] = None, recompute: bool = True
    ) -> "Ellipse":
        super().scale(factor, about, recompute=False)
        self.rx *= abs(factor)
        self.ry *= abs(factor)
        if recompute:
            self.recompute()
        return self

    def clone(self) -> "Ellipse":
        return Ellipse(*self.values)


class Polygon(Figure):
    """A closed polygon through its vertices. It caches nothing."""

    def __init__(self, *points: Point):
        super().__init__()
        if len(points) < MIN_POLYGON_SIDES:
            raise ValueError(
                f"Polygon needs at least {MIN_POLYGON_SIDES} points, got {len(points)}"
            )
        for point in points:
            if not isinstance(point, Point):
                raise TypeError(f"Polygon vertices must be Points, got {type(point).__name__}")
        self.points = [point.clone() for point in points]

    @property
    def values(self) -> Tuple[Point, ...]:
        return tuple(self.points)

    @property
    def sides(self) -> int:
        return len(self.points)

    @property
    def size(self) -> Size:
        return self.bounding_box.size

    def clone(self) -> "Polygon":
        return Polygon(*self.values)
