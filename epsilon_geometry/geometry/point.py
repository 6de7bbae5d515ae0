# epsilon_geometry/geometry/point.py
from typing import Sequence, Tuple, Union
from pydantic import Field, field_validator
import math
from epsilon_geometry.utils.base_model import ImmutableModel


class Point(ImmutableModel):
    """
    Represents a 2D point in Cartesian coordinates.

    Points are plain values: the predicates never store them, and they accept
    either a Point or any (x, y) pair wherever a point is expected.
    """
    x: float = Field(description="X coordinate")
    y: float = Field(description="Y coordinate")

    @field_validator("x", "y")
    @classmethod
    def validate_coordinates(cls, value: float) -> float:
        """Validate that coordinates are finite numbers."""
        if not math.isfinite(value):
            raise ValueError(f"Coordinate must be a finite number, got {value}")
        return value

    @classmethod
    def from_pair(cls, pair: Sequence[float]) -> "Point":
        """Build a point from an (x, y) pair."""
        x, y = pair
        return cls(x=x, y=y)

    def as_tuple(self) -> Tuple[float, float]:
        """Return the coordinates as an (x, y) tuple."""
        return self.x, self.y

    def format_as_tuple(self) -> str:
        """Format the point as a tuple string."""
        return f"({self.x}, {self.y})"

    def __str__(self) -> str:
        return self.format_as_tuple()


PointLike = Union[Point, Sequence[float]]


def coordinates(point: PointLike) -> Tuple[float, float]:
    """Unpack a Point or an (x, y) pair into a tuple of floats."""
    if isinstance(point, Point):
        return point.x, point.y
    x, y = point
    return float(x), float(y)
