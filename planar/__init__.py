"""
planar - 2D point, line and ellipse value types
"""
__version__ = "0.1.0"

import logging

# Configure logging to print to console
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

from planar.geometry import Point, Line, Ellipse, ORIGIN
from planar.exports import distance, angle, create_point, create_line, create_ellipse

__all__ = [
    'Point',
    'Line',
    'Ellipse',
    'ORIGIN',
    'distance',
    'angle',
    'create_point',
    'create_line',
    'create_ellipse',
]
