# planar/geometry/ellipse.py
from pydantic import Field
import math
from planar.geometry.point import Point
from planar.utils.base_model import ImmutableModel


class Ellipse(ImmutableModel):
    """Axis-aligned ellipse given by its center and two radii."""
    position: Point = Field(description="Center of the ellipse")
    x_radius: float = Field(description="Radius along the x axis")
    y_radius: float = Field(description="Radius along the y axis")

    def translate(self, delta: Point) -> "Ellipse":
        """Move the center, keeping the radii."""
        return self.with_changes(position=self.position.translate(delta))

    def scale(self, factor: float) -> "Ellipse":
        """Multiply both radii by `factor`. The center stays where it is."""
        return self.with_changes(
            position=self.position.clone(),
            x_radius=self.x_radius * factor,
            y_radius=self.y_radius * factor
        )

    def is_hit(self, point: Point) -> bool:
        """
        Exact boundary hit test.

        The angle is taken in the ellipse's local frame, but the projected
        radii are compared with the untranslated coordinates of `point`.
        """
        base = point.translate(self.position.scale(-1))
        angle = base.angle()
        return (math.cos(angle) * self.x_radius == point.x
                and math.sin(angle) * self.y_radius == point.y)

    def clone(self) -> "Ellipse":
        return self.with_changes(position=self.position.clone())

    def __str__(self) -> str:
        return f"Ellipse({self.position}, rx={self.x_radius}, ry={self.y_radius})"
