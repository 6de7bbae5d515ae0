# epsilon_geometry/geometry/constants.py
"""Constants for tolerance-based geometric predicates."""

# Default tolerance when a context is created without a usable epsilon
EPSILON = 1e-10

# Coordinate axes, by index into a point pair
X_AXIS = 0
Y_AXIS = 1
