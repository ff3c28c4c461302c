import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

import numpy as np

from rapidgeom.numeric import clamp, is_close, safe_div

if TYPE_CHECKING:
    from rapidgeom.line import Line


class Point(np.ndarray):
    """A mutable 2D coordinate. Transforms act in place and return the point."""

    def __new__(cls, x: float, y: float) -> "Point":
        return np.asarray([float(x), float(y)], dtype=np.float64).view(cls)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, np.ndarray) or other.shape != (2,):
            return False
        return is_close(self.x, float(other[0])) and is_close(self.y, float(other[1]))

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    __hash__ = None

    def __str__(self):
        return f"Point(x={self.x}, y={self.y})"

    __repr__ = __str__

    @property
    def x(self) -> float:
        return float(self[0])

    @property
    def y(self) -> float:
        return float(self[1])

    def clone(self) -> "Point":
        return Point(self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def translate(self, vector: "Vector") -> "Point":
        self[0] += vector.dx
        self[1] += vector.dy
        return self

    def reflect(self, about: Union["Point", "Line"]) -> "Point":
        """
        Reflect the point about another point or about a line.

        A line reflection moves the point twice the way to the foot of its
        perpendicular on the line.
        """
        if isinstance(about, Point):
            mirror = about
        else:
            mirror = about.get_perpendicular_projection(self)
        translation = Vector.from_points(self, mirror).multiply(2)
        return self.translate(translation)

    def rotate(self, phi: float, about: Optional["Point"] = None) -> "Point":
        ox, oy = (0.0, 0.0) if about is None else (about.x, about.y)
        dx = self.x - ox
        dy = self.y - oy
        cos_phi = math.cos(phi)
        sin_phi = math.sin(phi)
        self[0] = dx * cos_phi - dy * sin_phi + ox
        self[1] = dy * cos_phi + dx * sin_phi + oy
        return self

    def scale(self, factor: float, about: Optional["Point"] = None) -> "Point":
        ox, oy = (0.0, 0.0) if about is None else (about.x, about.y)
        self[0] = ox + (self.x - ox) * factor
        self[1] = oy + (self.y - oy) * factor
        return self

    def to_json(self):
        return {
            "x": float(self.x),
            "y": float(self.y),
        }

    @staticmethod
    def from_json(json_data):
        return Point(json_data["x"], json_data["y"])


class Vector(np.ndarray):
    """A free 2D displacement (dx, dy)."""

    def __new__(cls, dx: float, dy: float) -> "Vector":
        return np.asarray([float(dx), float(dy)], dtype=np.float64).view(cls)

    @classmethod
    def from_points(cls, start: Point, end: Point) -> "Vector":
        return cls(end.x - start.x, end.y - start.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, np.ndarray) or other.shape != (2,):
            return False
        return is_close(self.dx, float(other[0])) and is_close(
            self.dy, float(other[1])
        )

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    __hash__ = None

    def __str__(self):
        return f"Vector(dx={self.dx}, dy={self.dy})"

    __repr__ = __str__

    @property
    def dx(self) -> float:
        return float(self[0])

    @property
    def dy(self) -> float:
        return float(self[1])

    @property
    def magnitude(self) -> float:
        return float(np.linalg.norm(self))

    def clone(self) -> "Vector":
        return Vector(self.dx, self.dy)

    def negated(self) -> "Vector":
        return Vector(-self.dx, -self.dy)

    def normalize(self) -> "Vector":
        magnitude = self.magnitude
        if magnitude == 0:
            raise ValueError("Cannot normalize a zero-length vector")
        return Vector(self.dx / magnitude, self.dy / magnitude)

    def set_components(self, dx: float, dy: float) -> "Vector":
        self[0] = dx
        self[1] = dy
        return self

    def dot_product(self, other: "Vector") -> float:
        return self.dx * other.dx + self.dy * other.dy

    def angle_to(self, other: "Vector") -> Optional[float]:
        """Unsigned angle between two vectors, None if either has no length."""
        cosine = safe_div(self.dot_product(other), self.magnitude * other.magnitude)
        if cosine is None:
            return None
        return math.acos(clamp(cosine, -1.0, 1.0))

    def multiply(self, factor: float) -> "Vector":
        self[0] *= factor
        self[1] *= factor
        return self

    def rotate(self, phi: float) -> "Vector":
        cos_phi = math.cos(phi)
        sin_phi = math.sin(phi)
        dx, dy = self.dx, self.dy
        return self.set_components(dx * cos_phi - dy * sin_phi, dy * cos_phi + dx * sin_phi)

    def reflect(self, about: Union[Point, "Line"]) -> "Vector":
        """
        Reflect the displacement itself.

        About a point this is a half-turn; about a line the vector is mirrored
        across the line's direction. A zero-length line is treated as vertical,
        the same way Line classifies it.
        """
        if isinstance(about, Point):
            return self.multiply(-1)
        direction = about.v
        if direction.magnitude == 0:
            ux, uy = 0.0, 1.0
        else:
            ux, uy = direction.normalize()
        projection = self.dx * ux + self.dy * uy
        return self.set_components(
            2 * projection * ux - self.dx, 2 * projection * uy - self.dy
        )

    def to_json(self):
        return {
            "dx": float(self.dx),
            "dy": float(self.dy),
        }

    @staticmethod
    def from_json(json_data):
        return Vector(json_data["dx"], json_data["dy"])


PointOrVector = Union[Point, Vector]


@dataclass
class Size:
    width: float
    height: float


@dataclass
class BoundingBox:
    """Axis-aligned extent of a figure."""

    x_min: float
    x_max: float
    y_min: float
    y_max: float

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def contains(self, point: Point) -> bool:
        return self.x_min <= point.x <= self.x_max and self.y_min <= point.y <= self.y_max

    @staticmethod
    def from_points(points) -> "BoundingBox":
        coordinates = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        x_min, y_min = coordinates.min(axis=0)
        x_max, y_max = coordinates.max(axis=0)
        return BoundingBox(float(x_min), float(x_max), float(y_min), float(y_max))

    def to_json(self):
        return {
            "x_min": self.x_min,
            "x_max": self.x_max,
            "y_min": self.y_min,
            "y_max": self.y_max,
        }
