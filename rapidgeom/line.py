"""
Line module - An infinite line (or segment) through two points.

The line is classified once per recompute as vertical, horizontal or oblique,
and every derived value is chosen per kind so that no computation divides by
zero. Values that are geometrically undefined are None.
"""

import math
from enum import Enum
from typing import Optional, Tuple

from rapidgeom.cad_types import Point, PointOrVector, Vector
from rapidgeom.constants import HALF_PI, LINE_ARITY
from rapidgeom.figure import Figure, Recomputable
from rapidgeom.numeric import is_close, is_zero, safe_div


class LineKind(Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    OBLIQUE = "oblique"


class Line(Figure, Recomputable):
    """
    A line defined by an anchor point and a second point or direction vector.

    Derived state:
        slope: dy/dx, None for a vertical line
        y_intercept: y at x = 0, None for a vertical line
        reciprocal: dx/dy, None for a horizontal line
        x_intercept: x at y = 0, None for a horizontal line
    """

    arity = LINE_ARITY

    def __init__(self, p0: Point, anchor: PointOrVector):
        super().__init__()
        self._set_controls(p0, [anchor])
        self.kind = LineKind.OBLIQUE
        self.slope: Optional[float] = None
        self.y_intercept: Optional[float] = None
        self.reciprocal: Optional[float] = None
        self.x_intercept: Optional[float] = None
        self.recompute()

    @property
    def p0(self) -> Point:
        return self.points[0]

    @property
    def p1(self) -> Point:
        return self.points[1]

    @property
    def v(self) -> Vector:
        return self.vectors[0]

    @property
    def values(self) -> Tuple[Point, PointOrVector]:
        if self.is_relative:
            return (self.p0, self.v)
        return (self.p0, self.p1)

    @property
    def is_vertical(self) -> bool:
        return self.kind is LineKind.VERTICAL

    @property
    def is_horizontal(self) -> bool:
        return self.kind is LineKind.HORIZONTAL

    @property
    def a(self) -> float:
        """x coefficient of the general form a*x + b*y = c."""
        if self.is_horizontal:
            return 0.0
        if self.is_vertical:
            return 1.0
        return self.slope

    @property
    def b(self) -> float:
        if self.is_vertical:
            return 0.0
        if self.is_horizontal:
            return 1.0
        return -1.0

    @property
    def c(self) -> float:
        if self.is_horizontal:
            return self.y_intercept
        if self.is_vertical:
            return self.x_intercept
        return -self.y_intercept

    @property
    def length(self) -> float:
        return self.p0.distance_to(self.p1)

    @property
    def direction_angle(self) -> float:
        return math.atan2(self.p1.y - self.p0.y, self.p1.x - self.p0.x)

    def clone(self) -> "Line":
        return Line(*self.values)

    def recompute(self) -> None:
        x0, y0 = self.p0.x, self.p0.y
        dx = self.p1.x - x0
        dy = self.p1.y - y0
        extent = max(abs(dx), abs(dy))

        if is_zero(dx, extent):
            self.kind = LineKind.VERTICAL
            self.slope = None
            self.y_intercept = None
            # a zero-length line has no direction at all
            self.reciprocal = None if is_zero(dy, extent) else 0.0
            self.x_intercept = x0
        elif is_zero(dy, extent):
            self.kind = LineKind.HORIZONTAL
            self.slope = 0.0
            self.y_intercept = y0
            self.reciprocal = None
            self.x_intercept = None
        else:
            self.kind = LineKind.OBLIQUE
            self.slope = dy / dx
            self.y_intercept = y0 - self.slope * x0
            self.reciprocal = dx / dy
            self.x_intercept = x0 - self.reciprocal * y0

    def get_point_at_parameter(self, t: float) -> Point:
        return Point(self.p0.x + self.v.dx * t, self.p0.y + self.v.dy * t)

    def get_y_value_at_x(self, x: float) -> Optional[float]:
        if self.slope is None:
            return None
        return self.slope * x + self.y_intercept

    def get_x_value_at_y(self, y: float) -> Optional[float]:
        if self.reciprocal is None:
            return None
        return self.reciprocal * y + self.x_intercept

    def has_point(self, point: Point) -> bool:
        if self.is_vertical:
            return is_close(point.x, self.x_intercept)
        return is_close(self.get_y_value_at_x(point.x), point.y)

    def get_perpendicular_projection(self, point: Point) -> Point:
        """
        Foot of the perpendicular dropped from a point onto this line.

        Args:
            point: Point to project

        Returns:
            A new point on this line (a copy of ``point`` if it already lies on it)
        """
        if self.has_point(point):
            return point.clone()
        if self.is_vertical:
            return Point(self.x_intercept, point.y)
        if self.is_horizontal:
            return Point(point.x, self.y_intercept)

        m, k = self.slope, self.y_intercept
        x = (point.x + m * (point.y - k)) / (1 + m * m)
        return Point(x, m * x + k)

    def get_perpendicular_through(self, point: Point) -> "Line":
        if self.has_point(point):
            return self.clone().rotate(HALF_PI, point)
        return Line(point, self.get_perpendicular_projection(point))

    def get_intersection_point(self, line: "Line") -> Optional[Point]:
        """Solve both general forms with Cramer's rule; None for parallel lines."""
        if self.is_parallel_to(line):
            return None

        denominator = self.a * line.b - line.a * self.b
        x = safe_div(self.c * line.b - line.c * self.b, denominator)
        y = safe_div(self.a * line.c - line.a * self.c, denominator)
        if x is None or y is None:
            return None
        return Point(x, y)

    def angle_to(self, line: "Line") -> float:
        """Acute angle between two lines, in [0, π/2]."""
        if self.is_parallel_to(line):
            return 0.0
        if self.is_perpendicular_to(line):
            return HALF_PI
        if self.is_vertical or line.is_vertical:
            slope = line.slope if self.is_vertical else self.slope
            return HALF_PI - math.atan(abs(slope))

        tangent = safe_div(line.slope - self.slope, 1 + self.slope * line.slope)
        if tangent is None:
            return HALF_PI
        return math.atan(abs(tangent))

    def is_parallel_to(self, line: "Line") -> bool:
        if self.is_vertical or line.is_vertical:
            return self.is_vertical and line.is_vertical
        return is_close(self.slope, line.slope)

    def is_perpendicular_to(self, line: "Line") -> bool:
        if self.is_vertical:
            return line.is_horizontal
        if self.is_horizontal:
            return line.is_vertical
        if line.is_vertical or line.is_horizontal:
            return False
        return is_close(self.slope * line.slope, -1.0)

    def is_coincident_with(self, line: "Line") -> bool:
        return self.is_parallel_to(line) and self.has_point(line.p0)


def x_axis() -> Line:
    return Line(Point(0, 0), Point(1, 0))


def y_axis() -> Line:
    return Line(Point(0, 0), Point(0, 1))
