"""
Figure module - The transform contract shared by every planar figure.

A figure owns an ordered list of points that define it and an ordered list of
vectors that express its secondary controls relative to the first point.
Transforms mutate the owned points in place, re-derive the vectors from the
transformed control segments and then let the concrete figure refresh its
derived analytic state.
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

from rapidgeom.cad_types import BoundingBox, Point, PointOrVector, Vector

if TYPE_CHECKING:
    from rapidgeom.line import Line

logger = logging.getLogger(__name__)


class Recomputable(ABC):
    """Capability of figures that cache state derived from their points."""

    @abstractmethod
    def recompute(self) -> None:
        """Refresh every derived field from the current points."""
        ...


class Figure(ABC):
    arity: Optional[int] = None

    def __init__(self) -> None:
        self.points: List[Point] = []
        self.vectors: List[Vector] = []
        self.is_relative = False

    @classmethod
    def from_values(cls, values: Sequence[Any]) -> "Figure":
        """
        Build a figure from its defining tuple.

        Args:
            values: The tuple returned by ``values`` for this figure type

        Returns:
            A new figure of this type
        """
        if cls.arity is not None and len(values) != cls.arity:
            raise ValueError(
                f"{cls.__name__} expects {cls.arity} values, got {len(values)}"
            )
        return cls(*values)

    @property
    @abstractmethod
    def values(self) -> Tuple[Any, ...]:
        """The defining tuple, in the absolute or relative mode used to build it."""
        ...

    @abstractmethod
    def clone(self) -> "Figure": ...

    @property
    def bounding_box(self) -> BoundingBox:
        return BoundingBox.from_points(self.points)

    def translate(self, vector: Vector) -> "Figure":
        for point in self.points:
            point.translate(vector)

        logger.debug(f"Translated {type(self).__name__} by {vector}")
        self._recompute()
        return self

    def reflect(self, about: Union[Point, "Line"]) -> "Figure":
        about = about.clone()
        self._transform_controls(lambda point: point.reflect(about))

        logger.debug(f"Reflected {type(self).__name__} about {about}")
        self._recompute()
        return self

    def rotate(self, phi: float, about: Optional[Point] = None) -> "Figure":
        about = Point(0, 0) if about is None else about.clone()
        self._transform_controls(lambda point: point.rotate(phi, about))

        logger.debug(f"Rotated {type(self).__name__} by {phi} rad about {about}")
        self._recompute()
        return self

    def scale(
        self, factor: float, about: Optional[Point] = None, recompute: bool = True
    ) -> "Figure":
        """
        Scale the figure about a pivot.

        Args:
            factor: Scale factor applied to every position vector from the pivot
            about: Pivot point (default: origin)
            recompute: Set to False by figures that still have to adjust their
                own scalar fields; they must recompute themselves afterwards

        Returns:
            The scaled figure
        """
        about = Point(0, 0) if about is None else about.clone()
        for point in self.points:
            point.scale(factor, about)
        for vector in self.vectors:
            vector.multiply(factor)

        logger.debug(f"Scaled {type(self).__name__} by {factor} about {about}")
        if recompute:
            self._recompute()
        return self

    def to_json(self) -> Dict[str, Any]:
        return {
            "type": type(self).__name__,
            "relative": self.is_relative,
            "values": [
                value.to_json() if hasattr(value, "to_json") else value
                for value in self.values
            ],
        }

    def _set_controls(self, first: Point, controls: Sequence[PointOrVector]) -> None:
        """
        Normalize the controls into absolute points plus relative vectors.

        The controls following the first point are either all absolute points
        or all vectors relative to the first point. Inputs are cloned so the
        figure never shares a point or vector with its caller.
        """
        if not isinstance(first, Point):
            raise TypeError(
                f"{type(self).__name__} must start with a Point, got {type(first).__name__}"
            )
        for control in controls:
            if not isinstance(control, (Point, Vector)):
                raise TypeError(
                    f"{type(self).__name__} controls must be Points or Vectors, "
                    f"got {type(control).__name__}"
                )

        relative = [isinstance(control, Vector) for control in controls]
        if any(relative) and not all(relative):
            raise ValueError(
                f"{type(self).__name__} controls must be all Points or all Vectors"
            )

        anchor = first.clone()
        self.is_relative = bool(relative) and all(relative)
        self.points = [anchor]
        self.vectors = []
        for control in controls:
            if isinstance(control, Vector):
                vector = control.clone()
                point = anchor.clone().translate(vector)
            else:
                point = control.clone()
                vector = Vector.from_points(anchor, point)
            self.points.append(point)
            self.vectors.append(vector)

    def _transform_controls(self, transform: Callable[[Point], Point]) -> None:
        # Vectors follow from transforming both ends of their control segment,
        # never from transforming their components.
        segments = []
        if self.points:
            anchor = self.points[0]
            segments = [
                (anchor.clone(), anchor.clone().translate(vector))
                for vector in self.vectors
            ]

        for point in self.points:
            transform(point)

        for vector, (start, end) in zip(self.vectors, segments):
            transform(start)
            transform(end)
            vector.set_components(end.x - start.x, end.y - start.y)

    def _recompute(self) -> None:
        if isinstance(self, Recomputable):
            self.recompute()
