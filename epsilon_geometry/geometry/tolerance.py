# epsilon_geometry/geometry/tolerance.py
"""
Tolerance-aware predicates for 2D points and lines.

Every comparison goes through ToleranceContext.round(), which snaps a value to
the nearest multiple of epsilon. Two values are equal when their rounded
difference is zero, so segment splitting, vertex merging and event ordering in
a consumer all agree with each other for a given epsilon.
"""
import logging
import math
import numbers
from functools import cmp_to_key
from typing import Any, Callable, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator

from epsilon_geometry.geometry.constants import EPSILON, X_AXIS, Y_AXIS
from epsilon_geometry.geometry.intersection import Along, Intersection
from epsilon_geometry.geometry.point import Point, PointLike, coordinates
from epsilon_geometry.geometry.segment import Segment

logger = logging.getLogger(__name__)


def is_valid_epsilon(value: Any) -> bool:
    """True for finite, positive real numbers. Booleans do not count."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value) and value > 0


class ToleranceContext(BaseModel):
    """
    Holds one epsilon and answers every geometric predicate against it.

    Create one context per geometric computation pass and pass it explicitly
    to whatever needs it. A context is not synchronized: share it across
    threads only if nobody changes epsilon, otherwise give each worker its own
    (model_copy() is enough).

    Points may be Point objects or (x, y) pairs.
    """
    model_config = {
        "validate_assignment": True,
    }

    epsilon: float = Field(default=EPSILON, gt=0, description="Half-width of the band treated as zero")

    @field_validator("epsilon", mode="before")
    @classmethod
    def normalize_epsilon(cls, value: Any) -> float:
        """Replace anything that is not a finite positive number with the default."""
        if not is_valid_epsilon(value):
            logger.debug(f"Unusable epsilon {value!r}, using default {EPSILON}")
            return EPSILON
        return float(value)

    def model_post_init(self, __context) -> None:
        super().model_post_init(__context)
        logger.debug(f"Created tolerance context with epsilon={self.epsilon}")

    # Tolerance store

    def get_epsilon(self) -> float:
        return self.epsilon

    def set_epsilon(self, value: Any) -> float:
        """
        Change epsilon if value is a finite positive number.

        Anything else is ignored without raising. Either way the epsilon in
        effect afterwards is returned.
        """
        if is_valid_epsilon(value):
            if value != self.epsilon:
                logger.debug(f"Epsilon changed from {self.epsilon} to {value}")
            self.epsilon = value
        else:
            logger.debug(f"Ignoring epsilon {value!r}, keeping {self.epsilon}")
        return self.epsilon

    # Rounding and deltas

    def round(self, value: float) -> float:
        """
        Snap value to the nearest multiple of epsilon, ties away from zero.

        Very small epsilons make 1/epsilon large enough that the scaling step
        itself loses precision. Non-finite values are returned unchanged.
        """
        if not math.isfinite(value):
            return value
        factor = 1 / self.epsilon
        scaled = value * factor
        if not math.isfinite(scaled):
            return value
        magnitude = abs(scaled)
        whole = math.floor(magnitude)
        if magnitude - whole >= 0.5:
            whole += 1
        return math.copysign(whole, scaled) / factor

    def delta(self, v1: float, v2: float) -> float:
        """Rounded v2 - v1; positive when v2 is larger beyond tolerance."""
        # inf - inf is nan, so identical values short-circuit
        if v1 == v2:
            return 0.0
        return self.round(v2 - v1)

    def equal(self, v1: float, v2: float) -> bool:
        return self.delta(v1, v2) == 0

    def delta_x(self, p1: PointLike, p2: PointLike) -> float:
        return self.delta(coordinates(p1)[X_AXIS], coordinates(p2)[X_AXIS])

    def delta_y(self, p1: PointLike, p2: PointLike) -> float:
        return self.delta(coordinates(p1)[Y_AXIS], coordinates(p2)[Y_AXIS])

    def slope(self, p1: PointLike, p2: PointLike) -> float:
        """
        Rounded rise over rounded run from p1 to p2.

        Vertical segments have a signed infinite slope. The slope between two
        tolerance-equal points is nan.
        """
        dy = self.delta_y(p1, p2)
        dx = self.delta_x(p1, p2)
        if dx == 0:
            # Float division semantics; Python raises where IEEE gives inf/nan
            if dy == 0:
                return math.nan
            return math.copysign(math.inf, dy) * math.copysign(1.0, dx)
        return dy / dx

    def slopes_delta(self, a0: PointLike, a1: PointLike, b0: PointLike, b1: PointLike) -> float:
        return self.delta(self.slope(a0, a1), self.slope(b0, b1))

    def slopes_equal(self, a0: PointLike, a1: PointLike, b0: PointLike, b1: PointLike) -> bool:
        return self.slopes_delta(a0, a1, b0, b1) == 0

    # Point relations

    def points_same_x(self, p1: PointLike, p2: PointLike) -> bool:
        return self.delta_x(p1, p2) == 0

    def points_same_y(self, p1: PointLike, p2: PointLike) -> bool:
        return self.delta_y(p1, p2) == 0

    def points_same(self, p1: PointLike, p2: PointLike) -> bool:
        return self.points_same_x(p1, p2) and self.points_same_y(p1, p2)

    def points_compare(self, p1: PointLike, p2: PointLike) -> int:
        """
        Canonical ordering of two points.

        Returns -1 if p1 comes first, 1 if p2 comes first, 0 if they are the
        same point. Points are ordered by ascending X; when the X values are
        equal they are ordered by ascending Y.
        """
        if self.points_same_x(p1, p2):
            if self.points_same_y(p1, p2):
                return 0
            return -1 if self.delta_y(p1, p2) > 0 else 1
        return -1 if self.delta_x(p1, p2) > 0 else 1

    def point_sort_key(self) -> Callable[[PointLike], Any]:
        """Key function that sorts points by points_compare()."""
        return cmp_to_key(self.points_compare)

    # Collinearity and betweenness

    def points_collinear(self, p1: PointLike, p2: PointLike, p3: PointLike) -> bool:
        """Does p1 -> p2 -> p3 make a straight line?"""
        if self.points_same(p1, p2) or self.points_same(p2, p3) or self.points_same(p1, p3):
            return True
        # Both slopes run through p2, so equal slopes mean one line
        return self.slopes_equal(p1, p2, p2, p3)

    def point_above_or_on_line(self, p: PointLike, left: PointLike, right: PointLike) -> bool:
        return self.slope(left, right) <= self.slope(left, p)

    def point_between(self, p: PointLike, left: PointLike, right: PointLike) -> bool:
        """
        Is p strictly inside the segment from left to right?

        False when p is at either end or when left and right coincide. Both
        coordinates of p must lie strictly between those of left and right, so
        horizontal, vertical and falling segments never contain a point.
        """
        return (
            self.slopes_equal(left, right, left, p)
            and not self.points_same(left, right)
            and self.delta_x(left, p) > 0 and self.delta_y(left, p) > 0
            and self.delta_x(right, p) < 0 and self.delta_y(right, p) < 0
        )

    # Line intersection

    def lines_intersect(self, a0: PointLike, a1: PointLike,
                        b0: PointLike, b1: PointLike) -> Union[Intersection, Literal[False]]:
        """
        Intersect the infinite lines through a0 -> a1 and b0 -> b1.

        Returns:
            False if the lines are parallel or coincident, otherwise the
            intersection point with its position along each segment
        """
        if self.slopes_equal(a0, a1, b0, b1):
            return False

        point = self.intersection_point(a0, a1, b0, b1)
        if point is None:
            return False

        return Intersection(
            point=point,
            along_a=self.intersection_along(point, a0, a1),
            along_b=self.intersection_along(point, b0, b1),
        )

    def segments_intersect(self, a: Segment, b: Segment) -> Union[Intersection, Literal[False]]:
        """lines_intersect() for two Segment objects."""
        return self.lines_intersect(a.start, a.end, b.start, b.end)

    def intersection_point(self, a0: PointLike, a1: PointLike,
                           b0: PointLike, b1: PointLike) -> Optional[Point]:
        """
        Crossing point of the two infinite lines, or None if the rounded
        direction vectors have a zero cross product.
        """
        adx = self.delta_x(a0, a1)
        ady = self.delta_y(a0, a1)
        bdx = self.delta_x(b0, b1)
        bdy = self.delta_y(b0, b1)

        axb = adx * bdy - ady * bdx
        if axb == 0:
            return None

        dx = self.delta_x(b0, a0)
        dy = self.delta_y(b0, a0)

        a = (bdx * dy - bdy * dx) / axb

        ax, ay = coordinates(a0)
        return Point(x=ax + a * adx, y=ay + a * ady)

    def intersection_along(self, point: PointLike, left: PointLike, right: PointLike) -> Along:
        """
        Classify point against the segment left -> right.

        Compares on X, or on Y when the segment is vertical.
        """
        axis = X_AXIS
        left_xy = coordinates(left)
        right_xy = coordinates(right)
        if self.equal(left_xy[X_AXIS], right_xy[X_AXIS]):
            axis = Y_AXIS

        p = coordinates(point)[axis]
        l = left_xy[axis]
        r = right_xy[axis]

        if self.delta(p, l) > 0:
            return Along.BEFORE_START
        elif self.equal(p, l):
            return Along.AT_START
        elif self.delta(p, l) < 0 and self.delta(p, r) > 0:
            return Along.BETWEEN
        elif self.equal(p, r):
            return Along.AT_END
        else:
            return Along.AFTER_END


def create_context(epsilon: Optional[float] = None) -> ToleranceContext:
    """Create a tolerance context; unusable epsilons fall back to the default."""
    return ToleranceContext(epsilon=epsilon)
