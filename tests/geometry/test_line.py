import pytest
import math
from pydantic import ValidationError
from planar.geometry.point import Point
from planar.geometry.line import Line


def make_line(x1, y1, x2, y2):
    return Line(start=Point(x=x1, y=y1), end=Point(x=x2, y=y2))


class TestLine:
    def test_create_line(self):
        start = Point(x=0.0, y=0.0)
        end = Point(x=3.0, y=4.0)
        line = Line(start=start, end=end)

        assert line.start == start
        assert line.end == end

    def test_zero_length_line_allowed(self):
        line = make_line(1.0, 1.0, 1.0, 1.0)
        assert line.length() == 0.0

    def test_invalid_endpoint(self):
        with pytest.raises(ValidationError):
            Line(start="origin", end=Point(x=1.0, y=1.0))

    def test_length(self):
        assert make_line(0.0, 0.0, 3.0, 4.0).length() == 5.0
        assert make_line(0.0, 0.0, 4.0, 0.0).length() == 4.0

    def test_angle(self):
        # Horizontal line
        assert make_line(0.0, 0.0, 4.0, 0.0).angle() == 0.0

        # Vertical line
        assert make_line(0.0, 0.0, 0.0, 1.0).angle() == pytest.approx(math.pi / 2)

        # 45-degree line
        assert make_line(0.0, 0.0, 1.0, 1.0).angle() == pytest.approx(math.pi / 4)

        # Reversed direction
        assert make_line(4.0, 0.0, 0.0, 0.0).angle() == pytest.approx(math.pi)

    def test_angle_to(self):
        vertical = make_line(0.0, 0.0, 0.0, 1.0)
        horizontal = make_line(0.0, 0.0, 1.0, 0.0)
        assert vertical.angle_to(horizontal) == pytest.approx(math.pi / 2)
        assert horizontal.angle_to(vertical) == pytest.approx(-math.pi / 2)

    def test_middle(self):
        assert make_line(0.0, 0.0, 1.0, 0.0).middle() == Point(x=0.5, y=0.0)
        assert make_line(1.0, 2.0, 5.0, 6.0).middle() == Point(x=3.0, y=4.0)

    def test_intersect(self):
        line1 = make_line(0.0, 0.0, 4.0, 4.0)
        line2 = make_line(0.0, 4.0, 4.0, 0.0)

        assert line1.intersect(line2) == Point(x=2.0, y=2.0)
        assert line2.intersect(line1) == Point(x=2.0, y=2.0)

    def test_intersect_beyond_segments(self):
        line1 = make_line(0.0, 0.0, 1.0, 0.0)
        line2 = make_line(3.0, -1.0, 3.0, 1.0)

        assert line1.intersect(line2) == Point(x=3.0, y=0.0)

    def test_intersect_parallel(self):
        line1 = make_line(0.0, 0.0, 4.0, 0.0)
        line2 = make_line(0.0, 1.0, 4.0, 1.0)

        assert line1.intersect(line2) is None

    def test_intersect_coincident(self):
        line1 = make_line(0.0, 0.0, 2.0, 0.0)
        line2 = make_line(1.0, 0.0, 3.0, 0.0)

        assert line1.intersect(line2) is None

    def test_is_hit_matches_only_midpoint(self):
        line = make_line(0.0, 0.0, 4.0, 0.0)

        assert line.is_hit(Point(x=2.0, y=0.0))
        assert not line.is_hit(Point(x=1.0, y=0.0))
        assert not line.is_hit(Point(x=0.0, y=0.0))
        assert not line.is_hit(Point(x=4.0, y=0.0))

    def test_is_hit_degenerate_line(self):
        line = make_line(1.0, 1.0, 1.0, 1.0)
        assert line.is_hit(Point(x=1.0, y=1.0))

    def test_translate(self):
        line = make_line(0.0, 0.0, 1.0, 2.0).translate(Point(x=1.0, y=-1.0))
        assert line == make_line(1.0, -1.0, 2.0, 1.0)

    def test_scale_moves_only_end(self):
        scaled = make_line(1.0, 1.0, 3.0, 3.0).scale(2.0)

        assert scaled.start == Point(x=1.0, y=1.0)
        assert scaled.end == Point(x=6.0, y=6.0)

    def test_rotate_on(self):
        origin = Point(x=1.0, y=0.0)
        line = make_line(0.0, 0.0, 2.0, 0.0).rotate_on(math.pi, origin)
        expected = Point(x=3.0, y=3.0).rotate_on(math.pi, origin)

        assert line.start == expected
        assert line.end == expected
        assert expected.x == pytest.approx(-1.0)
        assert expected.y == pytest.approx(0.0)

    def test_rotate_about_middle(self):
        line = make_line(0.0, 0.0, 2.0, 0.0).rotate(0.0)

        assert line.start == Point(x=1.0, y=0.0)
        assert line.end == Point(x=1.0, y=0.0)

    def test_clone(self):
        line = make_line(0.0, 0.0, 1.0, 1.0)
        copy = line.clone()

        assert copy == line
        assert copy is not line
        assert copy.start is not line.start

    def test_immutability(self):
        line = make_line(0.0, 0.0, 1.0, 1.0)

        with pytest.raises(Exception):
            line.start = Point(x=2.0, y=2.0)

    def test_string_representation(self):
        line = make_line(0.0, 0.0, 1.0, 1.0)
        assert str(line) == "Line((0.0, 0.0) -> (1.0, 1.0))"
