# planar/geometry/line.py
from typing import Optional
from pydantic import Field
import logging
from planar.geometry.point import Point
from planar.utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)


class Line(ImmutableModel):
    """
    Represents a line defined by two points.

    Length, midpoint and transforms treat it as the segment start -> end;
    intersect() treats it as the infinite line through both points.
    A zero-length line is allowed.
    """
    start: Point = Field(description="Starting point of the line")
    end: Point = Field(description="Ending point of the line")

    def length(self) -> float:
        """Get the length of the line segment."""
        return self.start.distance_to(self.end)

    def angle(self) -> float:
        """Get the angle of the line from start to end (in radians, measured from positive x-axis)."""
        return self.end.angle_to(self.start)

    def is_hit(self, point: Point) -> bool:
        """
        Exact hit test against the segment.

        Twice the start-to-point distance must equal the segment length
        exactly, so on a non-degenerate line only the midpoint registers.
        """
        to_point = self.start.distance_to(point)
        return to_point + self.start.distance_to(point) == self.length()

    def intersect(self, other: "Line") -> Optional[Point]:
        """
        Find the intersection point with another line.

        Both lines are extended infinitely, so the result may lie outside
        either segment.

        Args:
            other: The other line

        Returns:
            The intersection point, or None if the lines are exactly parallel
            or coincident
        """
        x1, y1 = self.start.x, self.start.y
        x2, y2 = self.end.x, self.end.y
        x3, y3 = other.start.x, other.start.y
        x4, y4 = other.end.x, other.end.y

        denom = (y4 - y3) * (x2 - x1) - (x4 - x3) * (y2 - y1)
        if denom == 0:
            logger.debug(f"No intersection between parallel lines {self} and {other}")
            return None

        ua = ((x4 - x3) * (y1 - y3) - (y4 - y3) * (x1 - x3)) / denom
        return Point(x=x1 + ua * (x2 - x1), y=y1 + ua * (y2 - y1))

    def angle_to(self, other: "Line") -> float:
        """Difference between this line's angle and another's."""
        return self.angle() - other.angle()

    def middle(self) -> Point:
        """Get the midpoint of the line segment."""
        return Point(x=(self.start.x + self.end.x) / 2, y=(self.start.y + self.end.y) / 2)

    def rotate(self, radians: float) -> "Line":
        """Rotate about the line's own midpoint."""
        return self.rotate_on(radians, self.middle())

    def rotate_on(self, radians: float, origin: Point) -> "Line":
        """Pass both endpoints through Point.rotate_on()."""
        return Line(
            start=self.start.rotate_on(radians, origin),
            end=self.end.rotate_on(radians, origin)
        )

    def translate(self, delta: Point) -> "Line":
        return Line(start=self.start.translate(delta), end=self.end.translate(delta))

    def scale(self, factor: float) -> "Line":
        """
        Scale the end point by `factor`.

        The start point is copied unscaled.
        """
        return self.with_changes(start=self.start.clone(), end=self.end.scale(factor))

    def clone(self) -> "Line":
        return Line(start=self.start.clone(), end=self.end.clone())

    def __str__(self) -> str:
        """String representation of the line."""
        return f"Line({self.start} -> {self.end})"
