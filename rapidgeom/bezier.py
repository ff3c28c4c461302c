"""
Bezier curves and their coordinate extrema.

A critical point is a point of the curve where x or y reaches a local extremum,
i.e. where the derivative of that coordinate vanishes for a parameter in
[0, 1]. The quadratic curve has at most one such point per axis and keeps the
first one found; the cubic curve keeps every distinct one, at most four.
"""

import logging
import math
from abc import abstractmethod
from typing import List, Optional, Tuple

from rapidgeom.cad_types import BoundingBox, Point, PointOrVector, Vector
from rapidgeom.constants import AXES, CUBIC_ARITY, PRECISION, QUADRATIC_ARITY
from rapidgeom.figure import Figure, Recomputable
from rapidgeom.numeric import clamp, is_close, is_finite, is_zero, safe_div

logger = logging.getLogger(__name__)


class BezierCurve(Figure, Recomputable):
    """Common evaluation for Bezier curves of any degree."""

    def __init__(self, p0: Point, *controls: PointOrVector):
        super().__init__()
        self._set_controls(p0, controls)

    @property
    def degree(self) -> int:
        return len(self.points) - 1

    @property
    def values(self) -> Tuple[PointOrVector, ...]:
        if self.is_relative:
            return (self.points[0], *self.vectors)
        return tuple(self.points)

    @property
    @abstractmethod
    def critical_points(self) -> List[Point]: ...

    @property
    def bounding_box(self) -> BoundingBox:
        return BoundingBox.from_points(
            [self.points[0], self.points[-1], *self.critical_points]
        )

    def clone(self) -> "BezierCurve":
        return type(self)(*self.values)

    def get_coordinate_at_parameter(self, t: float, axis: str) -> Optional[float]:
        """
        Evaluate one coordinate with the Bernstein form of the curve.

        Args:
            t: Curve parameter
            axis: "x" or "y"

        Returns:
            The coordinate, or None if it is not finite
        """
        n = self.degree
        coordinates = self._axis_coordinates(axis)
        coordinate = sum(
            math.comb(n, i) * (1 - t) ** (n - i) * t**i * p
            for i, p in enumerate(coordinates)
        )
        if not is_finite(coordinate):
            return None
        return float(coordinate)

    def get_point_at_parameter(self, t: float) -> Optional[Point]:
        x = self.get_coordinate_at_parameter(t, "x")
        y = self.get_coordinate_at_parameter(t, "y")
        if x is None or y is None:
            logger.debug(f"Discarding non-finite point of {type(self).__name__} at t={t}")
            return None
        return Point(x, y)

    def _axis_coordinates(self, axis: str) -> List[float]:
        index = AXES.index(axis)
        return [float(point[index]) for point in self.points]

    @staticmethod
    def _to_parameter(t: Optional[float]) -> Optional[float]:
        # accept round-off just outside [0, 1]
        if not is_finite(t) or t < -PRECISION or t > 1 + PRECISION:
            return None
        return clamp(t, 0.0, 1.0)


class QuadraticBezierCurve(BezierCurve):
    arity = QUADRATIC_ARITY

    def __init__(self, p0: Point, c1: PointOrVector, c2: PointOrVector):
        super().__init__(p0, c1, c2)
        self.critical_parameter: Optional[float] = None
        self.critical_point: Optional[Point] = None
        self.recompute()

    @property
    def p0(self) -> Point:
        return self.points[0]

    @property
    def p1(self) -> Point:
        return self.points[1]

    @property
    def p2(self) -> Point:
        return self.points[2]

    @property
    def v1(self) -> Vector:
        return self.vectors[0]

    @property
    def v2(self) -> Vector:
        return self.vectors[1]

    @property
    def critical_points(self) -> List[Point]:
        return [] if self.critical_point is None else [self.critical_point]

    def recompute(self) -> None:
        self.critical_parameter = self._compute_critical_parameter()
        self.critical_point = None
        if self.critical_parameter is not None:
            self.critical_point = self.get_point_at_parameter(self.critical_parameter)

    def _compute_critical_parameter(self) -> Optional[float]:
        # B'(t) = 0  <=>  P0 - P1 = t * (P0 - 2 P1 + P2), solved per axis
        for axis in AXES:
            p0, p1, p2 = self._axis_coordinates(axis)
            t = self._to_parameter(safe_div(p0 - p1, p0 - 2 * p1 + p2))
            if t is not None:
                return t
        return None


class CubicBezierCurve(BezierCurve):
    arity = CUBIC_ARITY

    def __init__(
        self, p0: Point, c1: PointOrVector, c2: PointOrVector, c3: PointOrVector
    ):
        super().__init__(p0, c1, c2, c3)
        self.critical_parameters: List[float] = []
        self._critical_points: List[Point] = []
        self.recompute()

    @property
    def p0(self) -> Point:
        return self.points[0]

    @property
    def p1(self) -> Point:
        return self.points[1]

    @property
    def p2(self) -> Point:
        return self.points[2]

    @property
    def p3(self) -> Point:
        return self.points[3]

    @property
    def v1(self) -> Vector:
        return self.vectors[0]

    @property
    def v2(self) -> Vector:
        return self.vectors[1]

    @property
    def v3(self) -> Vector:
        return self.vectors[2]

    @property
    def critical_points(self) -> List[Point]:
        return self._critical_points

    def recompute(self) -> None:
        self.critical_parameters = self._compute_critical_parameters()
        self._critical_points = []
        for t in self.critical_parameters:
            point = self.get_point_at_parameter(t)
            if point is not None:
                self._critical_points.append(point)

    def _compute_critical_parameters(self) -> List[float]:
        parameters: List[float] = []
        for axis in AXES:
            for t in self._axis_roots(axis):
                t = self._to_parameter(t)
                if t is None:
                    continue
                if not any(is_close(t, known) for known in parameters):
                    parameters.append(t)
        return parameters

    def _axis_roots(self, axis: str) -> List[Optional[float]]:
        """Roots of the derivative a*t^2 + b*t + c of one coordinate."""
        p0, p1, p2, p3 = self._axis_coordinates(axis)
        a = 3 * (p3 - 3 * p2 + 3 * p1 - p0)
        b = 6 * (p2 - 2 * p1 + p0)
        c = 3 * (p1 - p0)

        if is_zero(a, max(abs(b), abs(c))):
            # degree drops to one
            return [safe_div(-c, b)]

        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return []
        root = math.sqrt(discriminant)
        return [safe_div(-b + sign * root, 2 * a) for sign in (1, -1)]
