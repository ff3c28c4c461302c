"""
rapidgeom - Planar analytic geometry with transform-stable derived state.

This package provides points, vectors, lines, elliptical arcs and Bezier curves
that can be translated, rotated, reflected and scaled while their slopes,
centres and extrema stay consistent.
"""

__version__ = "0.1.0"
__author__ = "Your Name"
__email__ = "your.email@example.com"

# Core geometry types
from .cad_types import BoundingBox, Point, Size, Vector

# Transform contract
from .figure import Figure, Recomputable

# Figures
from .line import Line, LineKind, x_axis, y_axis
from .arc_curve import ArcCurve
from .bezier import BezierCurve, CubicBezierCurve, QuadraticBezierCurve
from .shapes import Circle, Ellipse, Polygon

# Define what gets imported with "from rapidgeom import *"
__all__ = [
    # Geometry types
    "Point",
    "Vector",
    "BoundingBox",
    "Size",
    # Transform contract
    "Figure",
    "Recomputable",
    # Figures
    "Line",
    "LineKind",
    "x_axis",
    "y_axis",
    "ArcCurve",
    "BezierCurve",
    "QuadraticBezierCurve",
    "CubicBezierCurve",
    "Circle",
    "Ellipse",
    "Polygon",
]
