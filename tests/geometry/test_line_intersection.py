import pytest
from epsilon_geometry.geometry.intersection import Along, Intersection
from epsilon_geometry.geometry.point import Point
from epsilon_geometry.geometry.segment import Segment
from epsilon_geometry.geometry.tolerance import create_context


@pytest.fixture
def ctx():
    return create_context()


class TestLinesIntersect:
    def test_crossing_diagonals(self, ctx):
        result = ctx.lines_intersect((0.0, 0.0), (2.0, 2.0), (0.0, 2.0), (2.0, 0.0))

        assert isinstance(result, Intersection)
        assert result.point.x == pytest.approx(1.0)
        assert result.point.y == pytest.approx(1.0)
        assert result.along_a == 0
        assert result.along_b == 0
        assert result.on_both

    def test_t_junction(self, ctx):
        result = ctx.lines_intersect((0.0, 0.0), (2.0, 0.0), (1.0, 0.0), (1.0, 2.0))

        assert result.point.x == pytest.approx(1.0)
        assert result.point.y == pytest.approx(0.0)
        assert result.along_a == Along.BETWEEN
        assert result.along_b == Along.AT_START

    def test_parallel_lines(self, ctx):
        assert ctx.lines_intersect((0.0, 0.0), (1.0, 1.0), (0.0, 1.0), (1.0, 2.0)) is False
        assert ctx.lines_intersect((0.0, 0.0), (1.0, 0.0), (0.0, 1.0), (5.0, 1.0)) is False
        assert ctx.lines_intersect((0.0, 0.0), (0.0, 1.0), (3.0, 0.0), (3.0, 4.0)) is False

    def test_coincident_lines(self, ctx):
        assert ctx.lines_intersect((0.0, 0.0), (2.0, 2.0), (1.0, 1.0), (3.0, 3.0)) is False

    def test_opposed_vertical_lines(self, ctx):
        # Opposite infinite slopes are unequal, but there is still no crossing
        assert ctx.lines_intersect((0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)) is False

    def test_crossing_beyond_both_segments(self, ctx):
        result = ctx.lines_intersect((0.0, 0.0), (1.0, 1.0), (3.0, 0.0), (3.0, 1.0))

        assert result.point.as_tuple() == pytest.approx((3.0, 3.0))
        assert result.along_a == Along.AFTER_END
        assert result.along_b == Along.AFTER_END
        assert not result.on_both

    def test_crossing_before_start(self, ctx):
        result = ctx.lines_intersect((1.5, 1.5), (2.0, 2.0), (0.0, 2.0), (2.0, 0.0))

        assert result.point.as_tuple() == pytest.approx((1.0, 1.0))
        assert result.along_a == Along.BEFORE_START
        assert result.along_b == Along.BETWEEN

    def test_crossing_at_end(self, ctx):
        result = ctx.lines_intersect((0.0, 0.0), (1.0, 1.0), (0.0, 2.0), (2.0, 0.0))

        assert result.point.as_tuple() == pytest.approx((1.0, 1.0))
        assert result.along_a == Along.AT_END
        assert result.along_b == Along.BETWEEN

    def test_accepts_point_objects(self, ctx):
        result = ctx.lines_intersect(
            Point(x=0.0, y=0.0), Point(x=2.0, y=2.0),
            Point(x=0.0, y=2.0), Point(x=2.0, y=0.0)
        )
        assert result.point.as_tuple() == pytest.approx((1.0, 1.0))

    def test_segments_intersect(self, ctx):
        a = Segment(start=(0.0, 0.0), end=(2.0, 0.0))
        b = Segment(start=(1.0, 0.0), end=(1.0, 2.0))

        result = ctx.segments_intersect(a, b)
        assert result.along_a == Along.BETWEEN
        assert result.along_b == Along.AT_START

        assert ctx.segments_intersect(a, a) is False


class TestIntersectionPoint:
    def test_infinite_lines(self, ctx):
        point = ctx.intersection_point((0.0, 0.0), (1.0, 0.0), (5.0, 1.0), (5.0, 2.0))
        assert point.as_tuple() == pytest.approx((5.0, 0.0))

    def test_no_unique_point(self, ctx):
        assert ctx.intersection_point((0.0, 0.0), (1.0, 1.0), (0.0, 1.0), (1.0, 2.0)) is None


class TestIntersectionAlong:
    def test_horizontal_segment(self, ctx):
        left, right = (0.0, 0.0), (4.0, 0.0)
        assert ctx.intersection_along((-1.0, 0.0), left, right) == Along.BEFORE_START
        assert ctx.intersection_along((0.0, 0.0), left, right) == Along.AT_START
        assert ctx.intersection_along((2.0, 0.0), left, right) == Along.BETWEEN
        assert ctx.intersection_along((4.0, 0.0), left, right) == Along.AT_END
        assert ctx.intersection_along((5.0, 0.0), left, right) == Along.AFTER_END

    def test_vertical_segment_uses_y(self, ctx):
        left, right = (1.0, 0.0), (1.0, 4.0)
        assert ctx.intersection_along((1.0, -1.0), left, right) == Along.BEFORE_START
        assert ctx.intersection_along((1.0, 0.0), left, right) == Along.AT_START
        assert ctx.intersection_along((1.0, 2.0), left, right) == Along.BETWEEN
        assert ctx.intersection_along((1.0, 4.0), left, right) == Along.AT_END
        assert ctx.intersection_along((1.0, 5.0), left, right) == Along.AFTER_END

    def test_endpoints_within_tolerance(self, ctx):
        left, right = (0.0, 0.0), (4.0, 4.0)
        assert ctx.intersection_along((1e-12, 1e-12), left, right) == Along.AT_START
        assert ctx.intersection_along((4.0 - 1e-12, 4.0), left, right) == Along.AT_END

    def test_descending_segment_is_not_reinterpreted(self, ctx):
        # Codes compare raw axis values, so a right-to-left segment reads
        # every interior point as lying before its start
        left, right = (4.0, 0.0), (0.0, 0.0)
        assert ctx.intersection_along((2.0, 0.0), left, right) == Along.BEFORE_START
        assert ctx.intersection_along((4.0, 0.0), left, right) == Along.AT_START

    def test_epsilon_change_moves_classification(self, ctx):
        left, right = (0.0, 0.0), (4.0, 0.0)
        point = (1e-5, 0.0)
        assert ctx.intersection_along(point, left, right) == Along.BETWEEN

        ctx.set_epsilon(1e-3)
        assert ctx.intersection_along(point, left, right) == Along.AT_START
