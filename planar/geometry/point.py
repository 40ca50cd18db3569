# planar/geometry/point.py
from pydantic import Field
import math
from planar.geometry.constants import EPSILON
from planar.utils.base_model import ImmutableModel


class Point(ImmutableModel):
    """
    Represents a 2D point in Cartesian coordinates.

    Every transform returns a new Point. Coordinates are plain floats and
    non-finite values are carried through arithmetic unchanged.
    """
    x: float = Field(description="X coordinate")
    y: float = Field(description="Y coordinate")

    def angle_to(self, other: "Point") -> float:
        """
        Angle of the vector pointing from `other` to this point.

        Returns angle in radians, in range (-π, π].
        """
        return math.atan2(self.y - other.y, self.x - other.x)

    def distance_to(self, other: "Point") -> float:
        """Calculate the Euclidean distance to another point."""
        return math.sqrt((other.x - self.x) ** 2 + (other.y - self.y) ** 2)

    def angle(self) -> float:
        """Polar angle of the point, measured at the origin."""
        return self.angle_to(ORIGIN)

    def distance(self) -> float:
        """Distance from the origin."""
        return self.distance_to(ORIGIN)

    def translate(self, delta: "Point") -> "Point":
        """Shift the point by a delta vector."""
        return Point(x=self.x + delta.x, y=self.y + delta.y)

    def scale(self, factor: float) -> "Point":
        """Scale the point coordinates by a factor."""
        return Point(x=self.x * factor, y=self.y * factor)

    def rotate(self, radians: float) -> "Point":
        """Rotate about the origin. See rotate_on()."""
        return self.rotate_on(radians, ORIGIN)

    def rotate_on(self, radians: float, origin: "Point") -> "Point":
        """
        Rotate the position vector of `origin` by `radians`.

        The result depends only on `origin` and `radians`; the coordinates of
        this point are not used. Line.rotate_on() relies on this behavior.

        Args:
            radians: Rotation angle, counter-clockwise
            origin: Reference point whose polar form is rotated

        Returns:
            The point at distance |origin| and angle origin.angle() + radians
        """
        d = origin.distance()
        theta = origin.angle() + radians
        return Point(x=math.cos(theta) * d, y=math.sin(theta) * d)

    def clone(self) -> "Point":
        """Return a distinct Point with the same coordinates."""
        return self.model_copy()

    def is_close_to(self, other: "Point", tolerance: float = None) -> bool:
        """
        Check if this point is close to another point within the specified tolerance.

        Args:
            other: The point to compare with
            tolerance: Maximum distance between points to be considered equal.
                      If None, uses the default EPSILON value.

        Returns:
            True if points are within the tolerance distance of each other
        """
        if tolerance is None:
            tolerance = EPSILON
        return self.distance_to(other) <= tolerance

    def __add__(self, other: "Point") -> "Point":
        """Vector addition of two points."""
        return self.translate(other)

    def __sub__(self, other: "Point") -> "Point":
        """Vector subtraction of two points."""
        return Point(x=self.x - other.x, y=self.y - other.y)

    def format_as_tuple(self) -> str:
        """Format the point as a tuple string."""
        return f"({self.x}, {self.y})"

    def __str__(self) -> str:
        return self.format_as_tuple()


# Fixed reference point for angle() and distance()
ORIGIN = Point(x=0.0, y=0.0)
