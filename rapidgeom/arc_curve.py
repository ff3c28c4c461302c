"""
ArcCurve module - Elliptical arc in endpoint parameterization.

The arc is described the way SVG path data describes it: two endpoints, the
ellipse radii, the rotation of the ellipse's x-axis and the large-arc and sweep
flags. The centre, the swept angle range and the points where the arc reaches
a local coordinate extremum are derived from those values and refreshed after
every transform.
"""

import logging
import math
from typing import List, Optional, Tuple, Union

from rapidgeom.cad_types import BoundingBox, Point, PointOrVector, Vector
from rapidgeom.constants import ARC_ARITY, PRECISION, TWO_PI
from rapidgeom.figure import Figure, Recomputable
from rapidgeom.line import Line
from rapidgeom.numeric import (
    degrees_to_radians,
    normalize_angle,
    radians_to_degrees,
    safe_div,
)

logger = logging.getLogger(__name__)


class ArcCurve(Figure, Recomputable):
    arity = ARC_ARITY

    def __init__(
        self,
        p0: Point,
        rx: float,
        ry: float,
        x_axis_rotation: float,
        large_arc_flag: bool,
        sweep_flag: bool,
        anchor: PointOrVector,
    ):
        """
        Initialize an elliptical arc.

        Args:
            p0: Start point of the arc
            rx: Radius along the ellipse's own x-axis
            ry: Radius along the ellipse's own y-axis
            x_axis_rotation: Rotation of the ellipse's x-axis in degrees
            large_arc_flag: Take the arc spanning more than 180 degrees
            sweep_flag: Sweep from the start point in the positive-angle direction
            anchor: End point, or vector from ``p0`` to the end point
        """
        super().__init__()
        if rx == 0 or ry == 0:
            raise ValueError(f"Arc radii must be non-zero, got rx={rx}, ry={ry}")

        self._set_controls(p0, [anchor])
        self.rx = abs(float(rx))
        self.ry = abs(float(ry))
        self.phi = degrees_to_radians(float(x_axis_rotation))
        self.large_arc_flag = bool(large_arc_flag)
        self.sweep_flag = bool(sweep_flag)

        if self.p0 == self.p1:
            logger.warning(f"Arc endpoints coincide at {self.p0}, the arc sweeps nothing")

        self.p0_prime = Point(0, 0)
        self.center_prime = Point(0, 0)
        self.center = Point(0, 0)
        self.theta_range: Tuple[float, float] = (0.0, 0.0)
        self.delta_theta = 0.0
        self.critical_points: List[Point] = []
        self.recompute()

    @property
    def p0(self) -> Point:
        return self.points[0]

    @property
    def p1(self) -> Point:
        return self.points[1]

    @property
    def v1(self) -> Vector:
        return self.vectors[0]

    @property
    def x_axis_rotation(self) -> float:
        """Rotation of the ellipse's x-axis in degrees."""
        return radians_to_degrees(self.phi)

    @property
    def start_theta(self) -> float:
        return self.get_theta_for_point(self.p0)

    @property
    def values(
        self,
    ) -> Tuple[Point, float, float, float, bool, bool, PointOrVector]:
        anchor = self.v1 if self.is_relative else self.p1
        return (
            self.p0,
            self.rx,
            self.ry,
            self.x_axis_rotation,
            self.large_arc_flag,
            self.sweep_flag,
            anchor,
        )

    @property
    def bounding_box(self) -> BoundingBox:
        return BoundingBox.from_points([self.p0, self.p1, *self.critical_points])

    def clone(self) -> "ArcCurve":
        return ArcCurve(*self.values)

    def recompute(self) -> None:
        self.p0_prime = self._compute_p0_prime()
        self._adjust_radii()
        self.center_prime = self._compute_center_prime()
        self.center = self._compute_center()
        self.theta_range = self._compute_theta_range()
        self.delta_theta = self._compute_delta_theta()
        self.critical_points = self._compute_critical_points()

    def rotate(self, phi: float, about: Optional[Point] = None) -> "ArcCurve":
        # The ellipse frame turns with the figure: carry its local x-axis,
        # anchored at the current centre, through the same rotation.
        pivot = Point(0, 0) if about is None else about.clone()
        axis_direction = Vector(self.rx, 0).rotate(self.phi)
        axis = Line(self.center.clone(), axis_direction)
        axis.rotate(phi, pivot)
        self.phi = normalize_angle(axis.direction_angle)

        super().rotate(phi, pivot)
        return self

    def reflect(self, about: Union[Point, Line]) -> "ArcCurve":
        """
        Mirror the arc.

        A line reflection reverses orientation: the sweep flips and the x-axis
        rotation mirrors across the line's direction. A point reflection is a
        half-turn, which preserves orientation, so the sweep flag and the
        x-axis rotation are kept.
        """
        if isinstance(about, Line):
            self.phi = normalize_angle(2 * about.direction_angle - self.phi)
            self.sweep_flag = not self.sweep_flag

        super().reflect(about)
        return self

    def scale(
        self, factor: float, about: Optional[Point] = None, recompute: bool = True
    ) -> "ArcCurve":
        if factor == 0:
            raise ValueError("Cannot scale an arc by 0, its radii must stay non-zero")

        super().scale(factor, about, recompute=False)
        self.rx *= abs(factor)
        self.ry *= abs(factor)
        if recompute:
            self.recompute()
        return self

    def get_point_at_theta(self, theta: float) -> Point:
        """Evaluate the ellipse's parametric equation at an angle."""
        cos_phi = math.cos(self.phi)
        sin_phi = math.sin(self.phi)
        cos_theta = math.cos(theta)
        sin_theta = math.sin(theta)
        x = self.rx * cos_phi * cos_theta - self.ry * sin_phi * sin_theta + self.center.x
        y = self.rx * sin_phi * cos_theta + self.ry * cos_phi * sin_theta + self.center.y
        return Point(x, y)

    def get_theta_for_point(self, point: Point) -> float:
        """Parametric angle of a point on the ellipse, folded into [0, 2π)."""
        cos_phi = math.cos(self.phi)
        sin_phi = math.sin(self.phi)
        dx = point.x - self.center.x
        dy = point.y - self.center.y
        sin_theta = (dy * cos_phi - dx * sin_phi) / self.ry
        cos_theta = (dx * cos_phi + dy * sin_phi) / self.rx
        return normalize_angle(math.atan2(sin_theta, cos_theta))

    def contains_theta(self, theta: float) -> bool:
        """True if the angle lies on the swept part of the ellipse."""
        start = self.start_theta
        if self.delta_theta >= 0:
            offset = normalize_angle(theta - start)
        else:
            offset = normalize_angle(start - theta)
        if offset > TWO_PI - PRECISION:
            offset = 0.0
        return offset <= abs(self.delta_theta) + PRECISION

    def _compute_p0_prime(self) -> Point:
        cos_phi = math.cos(self.phi)
        sin_phi = math.sin(self.phi)
        mx = (self.p0.x - self.p1.x) / 2
        my = (self.p0.y - self.p1.y) / 2
        return Point(cos_phi * mx + sin_phi * my, -sin_phi * mx + cos_phi * my)

    def _adjust_radii(self) -> None:
        x1_prime, y1_prime = self.p0_prime.x, self.p0_prime.y
        radii_check = x1_prime**2 / self.rx**2 + y1_prime**2 / self.ry**2
        if radii_check > 1:
            correction = math.sqrt(radii_check)
            logger.debug(
                f"Arc radii ({self.rx}, {self.ry}) too small for the endpoints, "
                f"scaling by {correction}"
            )
            self.rx *= correction
            self.ry *= correction

    def _compute_center_prime(self) -> Point:
        x1_prime, y1_prime = self.p0_prime.x, self.p0_prime.y
        rx_sq = self.rx**2
        ry_sq = self.ry**2
        x1_prime_sq = x1_prime**2
        y1_prime_sq = y1_prime**2

        sign = -1 if self.large_arc_flag == self.sweep_flag else 1
        radicand = safe_div(
            rx_sq * ry_sq - rx_sq * y1_prime_sq - ry_sq * x1_prime_sq,
            rx_sq * y1_prime_sq + ry_sq * x1_prime_sq,
        )
        # round-off can push the radicand slightly below zero
        if radicand is None or radicand < 0:
            radicand = 0.0

        coefficient = sign * math.sqrt(radicand)
        cx_prime = coefficient * self.rx * y1_prime / self.ry
        cy_prime = -coefficient * self.ry * x1_prime / self.rx
        return Point(cx_prime, cy_prime)

    def _compute_center(self) -> Point:
        cos_phi = math.cos(self.phi)
        sin_phi = math.sin(self.phi)
        cx_prime, cy_prime = self.center_prime.x, self.center_prime.y
        mid_x = (self.p0.x + self.p1.x) / 2
        mid_y = (self.p0.y + self.p1.y) / 2
        return Point(
            cos_phi * cx_prime - sin_phi * cy_prime + mid_x,
            sin_phi * cx_prime + cos_phi * cy_prime + mid_y,
        )

    def _compute_theta_range(self) -> Tuple[float, float]:
        theta_start = self.get_theta_for_point(self.p0)
        theta_end = self.get_theta_for_point(self.p1)
        return (min(theta_start, theta_end), max(theta_start, theta_end))

    def _compute_delta_theta(self) -> float:
        theta_start = self.get_theta_for_point(self.p0)
        theta_end = self.get_theta_for_point(self.p1)
        if self.sweep_flag:
            return normalize_angle(theta_end - theta_start)
        return -normalize_angle(theta_start - theta_end)

    def _compute_critical_thetas(self) -> List[float]:
        cos_phi = math.cos(self.phi)
        sin_phi = math.sin(self.phi)
        x_theta = normalize_angle(math.atan2(-self.ry * sin_phi, self.rx * cos_phi))
        y_theta = normalize_angle(math.atan2(self.ry * cos_phi, self.rx * sin_phi))
        candidates = [
            x_theta,
            normalize_angle(x_theta + math.pi),
            y_theta,
            normalize_angle(y_theta + math.pi),
        ]
        return [theta for theta in candidates if self.contains_theta(theta)]

    def _compute_critical_points(self) -> List[Point]:
        if self.p0 == self.p1:
            return []
        return [self.get_point_at_theta(theta) for theta in self._compute_critical_thetas()]
