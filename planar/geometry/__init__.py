from planar.geometry.point import Point, ORIGIN
from planar.geometry.line import Line
from planar.geometry.ellipse import Ellipse

__all__ = ['Point', 'ORIGIN', 'Line', 'Ellipse']
