# core/utils.py
import math

# Sentinel hit parameter meaning "no intersection yet".
NO_HIT = -1.0

# Cramer's rule main determinant counts as degenerate below this fraction
# of |direction| * |(B - A) x (C - A)|, the largest magnitude it can reach.
DETERMINANT_EPSILON = 1e-12

# Offset along the light direction for shadow ray origins.
SHADOW_EPSILON = 1e-6

def is_no_hit(t: float) -> bool:
    """
    Negative (or NaN) hit parameters all mean "no intersection".
    """
    return not t >= 0.0

def is_finite_positive(value: float) -> bool:
    return math.isfinite(value) and value > 0.0
