import math

PRECISION = 1e-9  # tolerance for every comparison between derived floats

TWO_PI = 2 * math.pi
HALF_PI = math.pi / 2

LINE_ARITY = 2  # point, point-or-vector
QUADRATIC_ARITY = 3  # point, two controls
CUBIC_ARITY = 4  # point, three controls
ARC_ARITY = 7  # point, rx, ry, x-axis rotation, large arc, sweep, point-or-vector
CIRCLE_ARITY = 2  # center, radius
ELLIPSE_ARITY = 3  # center, rx, ry

MIN_POLYGON_SIDES = 3

AXES = ("x", "y")
