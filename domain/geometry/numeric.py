# domain/geometry/numeric.py
"""Scalar float helpers shared by the geometry value types."""
import math
from typing import Optional
from domain.geometry.constants import ATOL, RTOL


def float_isclose(a: float, b: float, atol: Optional[float] = None, rtol: Optional[float] = None) -> bool:
    """
    Check whether ``a`` is close to ``b``.

    The test is ``|a - b| <= atol + rtol * |b|``. The relative term scales with
    ``b`` only, so the comparison is not symmetric: ``float_isclose(a, b)`` and
    ``float_isclose(b, a)`` can disagree when ``|a| != |b|``. This is the same
    convention as ``numpy.isclose``.

    Args:
        a: The value being tested
        b: The reference value
        atol: Absolute tolerance. If None, uses ATOL.
        rtol: Relative tolerance. If None, uses RTOL.

    Returns:
        True if ``a`` is within tolerance of ``b``
    """
    if atol is None:
        atol = ATOL
    if rtol is None:
        rtol = RTOL
    return abs(a - b) <= atol + rtol * abs(b)


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Divide two floats with IEEE-754 semantics for a zero denominator.

    Python raises ZeroDivisionError for ``x / 0.0``; here a non-zero numerator
    gives an infinity signed by both operands and ``0/0`` gives NaN.
    """
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    # Signed zero in the denominator flips the sign of the infinity
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
