# epsilon_geometry/geometry/intersection.py
from enum import IntEnum
from pydantic import Field
from epsilon_geometry.geometry.point import Point
from epsilon_geometry.utils.base_model import ImmutableModel


class Along(IntEnum):
    """Where an intersection point falls relative to a segment's two points."""
    BEFORE_START = -2
    AT_START = -1
    BETWEEN = 0
    AT_END = 1
    AFTER_END = 2


class Intersection(ImmutableModel):
    """
    The unique crossing point of two non-parallel lines.

    along_a and along_b classify the point against each of the two segments
    that defined the lines. The point itself may lie outside either segment.
    """
    point: Point = Field(description="Intersection of the two infinite lines")
    along_a: Along = Field(description="Position of the point along segment A")
    along_b: Along = Field(description="Position of the point along segment B")

    @property
    def on_both(self) -> bool:
        """True when the point touches or lies inside both segments."""
        return -1 <= self.along_a <= 1 and -1 <= self.along_b <= 1

    def __str__(self) -> str:
        return f"Intersection({self.point}, along_a={int(self.along_a)}, along_b={int(self.along_b)})"
