# domain/geometry/constants.py
"""Constants for geometric calculations."""

# Absolute tolerance for floating-point comparisons
ATOL = 1e-8

# Relative tolerance, scaled by the magnitude of the reference value
RTOL = 1e-5
