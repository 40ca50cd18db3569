# planar/exports.py
"""
Free-function entry points for callers working with raw coordinates.

`distance` and `angle` never require the caller to hold Point objects; the
create_* functions build the value types from plain numbers.
"""
import logging
from planar.geometry.point import Point
from planar.geometry.line import Line
from planar.geometry.ellipse import Ellipse

logger = logging.getLogger(__name__)


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between (x1, y1) and (x2, y2)."""
    return Point(x=x1, y=y1).distance_to(Point(x=x2, y=y2))


def angle(x1: float, y1: float, x2: float, y2: float) -> float:
    """Angle of the vector from (x2, y2) to (x1, y1), in radians."""
    return create_point(x1, y1).angle_to(create_point(x2, y2))


def create_point(x: float, y: float) -> Point:
    return Point(x=x, y=y)


def create_line(x1: float, y1: float, x2: float, y2: float) -> Line:
    line = Line(start=create_point(x1, y1), end=create_point(x2, y2))
    logger.debug(f"Created {line}")
    return line


def create_ellipse(position: Point, x_radius: float, y_radius: float) -> Ellipse:
    ellipse = Ellipse(position=position, x_radius=x_radius, y_radius=y_radius)
    logger.debug(f"Created {ellipse}")
    return ellipse
