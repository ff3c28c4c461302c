import logging
import math

import pytest

from rapidgeom.arc_curve import ArcCurve
from rapidgeom.cad_types import Point, Vector
from rapidgeom.line import Line


def quarter_arc():
    return ArcCurve(Point(0, 0), 5, 5, 0, False, True, Point(5, 5))


def assert_has_point(points, expected):
    assert any(point == expected for point in points), f"{expected} not in {points}"


def test_quarter_arc_center_and_sweep():
    arc = quarter_arc()
    assert arc.center == Point(0, 5)
    assert math.isclose(arc.center.distance_to(arc.p0), 5)
    assert math.isclose(arc.center.distance_to(arc.p1), 5)
    assert math.isclose(arc.delta_theta, math.pi / 2)
    assert len(arc.critical_points) == 2
    assert_has_point(arc.critical_points, Point(5, 5))
    assert_has_point(arc.critical_points, Point(0, 0))


def test_theta_range_is_sorted_and_holds_the_endpoints():
    arc = quarter_arc()
    theta_min, theta_max = arc.theta_range
    assert theta_min <= theta_max
    assert math.isclose(theta_min, 0, abs_tol=1e-12)
    assert math.isclose(theta_max, 3 * math.pi / 2)
    assert arc.contains_theta(theta_min)
    assert arc.contains_theta(theta_max)
    assert arc.get_point_at_theta(theta_max) == arc.p0
    assert arc.get_point_at_theta(theta_min) == arc.p1


def test_contains_theta_follows_the_sweep():
    arc = quarter_arc()
    assert arc.contains_theta(7 * math.pi / 4)
    assert not arc.contains_theta(math.pi)
    flipped = ArcCurve(Point(0, 0), 5, 5, 0, False, False, Point(5, 5))
    assert flipped.center == Point(5, 0)
    assert flipped.delta_theta < 0
    assert all(flipped.contains_theta(theta) for theta in flipped.theta_range)


def test_large_arc_takes_the_other_center():
    arc = ArcCurve(Point(0, 0), 5, 5, 0, True, True, Point(5, 5))
    assert arc.center == Point(5, 0)
    assert math.isclose(abs(arc.delta_theta), 3 * math.pi / 2)


def test_radii_are_scaled_up_when_too_small():
    arc = ArcCurve(Point(0, 0), 1, 1, 0, False, True, Point(10, 0))
    assert math.isclose(arc.rx, 5)
    assert math.isclose(arc.ry, 5)
    x1, y1 = arc.p0_prime.x, arc.p0_prime.y
    assert math.isclose((x1 / arc.rx) ** 2 + (y1 / arc.ry) ** 2, 1)
    assert arc.center == Point(5, 0)
    assert_has_point(arc.critical_points, Point(5, -5))


@pytest.mark.parametrize(
    "arc",
    [
        ArcCurve(Point(0, 0), 1, 2, 0, False, True, Point(3, 1)),
        ArcCurve(Point(0, 0), 0.5, 0.5, 45, True, False, Point(-2, 4)),
    ],
)
def test_corrected_radii_reach_the_endpoints(arc):
    x1, y1 = arc.p0_prime.x, arc.p0_prime.y
    assert (x1 / arc.rx) ** 2 + (y1 / arc.ry) ** 2 <= 1 + 1e-9
    assert arc.get_point_at_theta(arc.get_theta_for_point(arc.p0)) == arc.p0
    assert arc.get_point_at_theta(arc.get_theta_for_point(arc.p1)) == arc.p1


def test_critical_points_lie_on_the_arc():
    arc = ArcCurve(Point(0, 0), 5, 3, 30, True, True, Point(6, 2))
    # a sweep longer than half the ellipse passes at least one extremum per axis
    assert 2 <= len(arc.critical_points) <= 4
    for point in arc.critical_points:
        theta = arc.get_theta_for_point(point)
        assert arc.contains_theta(theta)
        assert arc.get_point_at_theta(theta) == point


@pytest.mark.parametrize(
    "arc",
    [
        ArcCurve(Point(0, 0), 5, 3, 30, False, True, Point(6, 2)),
        ArcCurve(Point(0, 0), 5, 3, 30, True, True, Point(6, 2)),
        ArcCurve(Point(1, -2), 4, 1, -70, True, False, Vector(-3, 1)),
        ArcCurve(Point(0, 0), 2, 2, 0, False, False, Point(0, 4)),
    ],
)
def test_bounding_box_holds_the_whole_sweep(arc):
    box = arc.bounding_box
    start = arc.start_theta
    for step in range(101):
        point = arc.get_point_at_theta(start + arc.delta_theta * step / 100)
        assert box.x_min - 1e-9 <= point.x <= box.x_max + 1e-9
        assert box.y_min - 1e-9 <= point.y <= box.y_max + 1e-9


def test_values_round_trip():
    arc = ArcCurve(Point(1, 2), 5, 3, 30, True, False, Point(6, 2))
    p0, rx, ry, rotation, large_arc, sweep, anchor = arc.values
    assert p0 == Point(1, 2)
    assert (rx, ry) == (5.0, 3.0)
    assert math.isclose(rotation, 30)
    assert (large_arc, sweep) == (True, False)
    assert anchor == Point(6, 2)
    rebuilt = ArcCurve(*arc.values)
    assert rebuilt.center == arc.center


def test_relative_arc():
    arc = ArcCurve(Point(0, 0), 5, 5, 0, False, True, Vector(5, 5))
    assert arc.is_relative
    assert isinstance(arc.values[-1], Vector)
    assert arc.p1 == Point(5, 5)
    assert arc.center == Point(0, 5)


def test_negative_radii_are_taken_as_absolute():
    arc = ArcCurve(Point(0, 0), -5, -5, 0, False, True, Point(5, 5))
    assert (arc.rx, arc.ry) == (5.0, 5.0)
    assert arc.center == Point(0, 5)


def test_zero_radius_is_rejected():
    with pytest.raises(ValueError):
        ArcCurve(Point(0, 0), 0, 5, 0, False, True, Point(5, 5))


def test_coincident_endpoints_sweep_nothing(caplog):
    with caplog.at_level(logging.WARNING, logger="rapidgeom.arc_curve"):
        arc = ArcCurve(Point(1, 1), 2, 2, 0, False, True, Point(1, 1))
    assert arc.critical_points == []
    assert "coincide" in caplog.text


def test_rotate_moves_the_center_with_the_arc():
    arc = quarter_arc()
    expected_center = arc.center.clone().rotate(math.pi / 2)
    arc.rotate(math.pi / 2)
    assert arc.center == expected_center
    assert arc.center == Point(-5, 0)
    assert math.isclose(arc.delta_theta, math.pi / 2)


def test_rotate_turns_the_ellipse_axis():
    arc = ArcCurve(Point(0, 0), 5, 3, 0, False, True, Point(6, 2))
    center = arc.center.clone().rotate(math.pi / 6, Point(2, 2))
    arc.rotate(math.pi / 6, Point(2, 2))
    assert math.isclose(arc.x_axis_rotation, 30)
    assert arc.center == center
    arc.rotate(-math.pi / 6, Point(2, 2))
    assert math.isclose(arc.x_axis_rotation, 0, abs_tol=1e-9) or math.isclose(
        arc.x_axis_rotation, 360
    )


def test_reflect_about_line_flips_the_sweep():
    arc = quarter_arc()
    arc.reflect(Line(Point(0, 0), Point(1, 0)))
    assert arc.sweep_flag is False
    assert arc.large_arc_flag is False
    assert arc.p1 == Point(5, -5)
    assert arc.center == Point(0, -5)


def test_reflect_about_tilted_line_mirrors_the_center():
    arc = ArcCurve(Point(0, 0), 5, 3, 30, False, True, Point(6, 2))
    axis = Line(Point(0, 1), Point(3, 2))
    expected_center = arc.center.clone().reflect(axis)
    arc.reflect(axis)
    assert arc.center == expected_center
    arc.reflect(axis)
    assert arc.sweep_flag is True
    assert math.isclose(arc.x_axis_rotation, 30)


def test_reflect_about_point_is_a_half_turn():
    arc = quarter_arc()
    arc.reflect(Point(1, 1))
    assert arc.p0 == Point(2, 2)
    assert arc.p1 == Point(-3, -3)
    assert arc.sweep_flag is True
    assert arc.center == Point(2, -3)


def test_scale_scales_radii_and_center():
    arc = quarter_arc().scale(2)
    assert (arc.rx, arc.ry) == (10.0, 10.0)
    assert arc.center == Point(0, 10)

    mirrored = quarter_arc().scale(-1)
    assert (mirrored.rx, mirrored.ry) == (5.0, 5.0)
    assert mirrored.center == Point(0, -5)


def test_scale_can_defer_recompute():
    arc = quarter_arc().scale(2, recompute=False)
    assert (arc.rx, arc.ry) == (10.0, 10.0)
    assert arc.p1 == Point(10, 10)
    assert arc.center == Point(0, 5)
    arc.recompute()
    assert arc.center == Point(0, 10)


def test_scale_by_zero_is_rejected():
    arc = quarter_arc()
    with pytest.raises(ValueError):
        arc.scale(0)
    assert arc.p1 == Point(5, 5)
    assert (arc.rx, arc.ry) == (5.0, 5.0)
    assert arc.center == Point(0, 5)
