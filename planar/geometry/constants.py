# planar/geometry/constants.py
"""Constants for geometric calculations."""

# Default tolerance for approximate floating-point comparisons
EPSILON = 1e-10
