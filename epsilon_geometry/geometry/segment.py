# epsilon_geometry/geometry/segment.py
from typing import Any, Tuple
from pydantic import Field, field_validator
from epsilon_geometry.geometry.point import Point
from epsilon_geometry.utils.base_model import ImmutableModel


class Segment(ImmutableModel):
    """
    A directed line segment from start to end.

    Segments only exist as arguments to the intersection predicates. A segment
    whose endpoints coincide is still a valid value; the predicates decide
    what a degenerate segment means.
    """
    start: Point = Field(description="First point of the segment")
    end: Point = Field(description="Second point of the segment")

    @field_validator("start", "end", mode="before")
    @classmethod
    def coerce_point(cls, v: Any) -> Any:
        """Accept (x, y) pairs as well as Point objects."""
        if isinstance(v, (Point, dict)):
            return v
        if isinstance(v, (tuple, list)):
            return Point.from_pair(v)
        raise ValueError(f"Expected Point object or (x, y) pair, got {type(v)}")

    def as_tuple(self) -> Tuple[Tuple[float, float], Tuple[float, float]]:
        """Return the endpoints as ((x0, y0), (x1, y1))."""
        return self.start.as_tuple(), self.end.as_tuple()

    def reversed(self) -> "Segment":
        """The same segment traversed from end to start."""
        return self.with_changes(start=self.end, end=self.start)

    def __str__(self) -> str:
        return f"Segment({self.start} -> {self.end})"
