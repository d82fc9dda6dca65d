# domain/geometry/point.py
from typing import Optional
from pydantic import Field
import logging
import math
from numbers import Real
from domain.geometry.numeric import float_isclose, ieee_divide
from utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)


class Point(ImmutableModel):
    """
    Represents a 2D point in Cartesian coordinates.

    A Point doubles as a displacement vector from the origin. Coordinates are
    not validated beyond being numbers: NaN and infinities are accepted and
    flow through every operation following IEEE-754 float semantics, so no
    operation raises on degenerate input.
    """
    x: float = Field(description="X coordinate")
    y: float = Field(description="Y coordinate")

    def angle(self) -> float:
        """
        Angle in radians from the positive x-axis to the point.

        This is the polar angle, computed with atan2, in range (-π, π].
        """
        return math.atan2(self.y, self.x)

    def mul(self, scalar: float) -> "Point":
        """Multiply both coordinates by a scalar."""
        return Point(x=self.x * scalar, y=self.y * scalar)

    def div(self, scalar: float) -> "Point":
        """
        Divide both coordinates by a scalar.

        Dividing by zero produces infinities or NaN rather than raising.
        """
        return Point(x=ieee_divide(self.x, scalar), y=ieee_divide(self.y, scalar))

    def rotate(self, angle: float) -> "Point":
        """Rotate the point counter-clockwise about the origin by angle radians."""
        if math.isinf(angle):
            # sin/cos of an infinite angle are undefined
            s = c = math.nan
        else:
            s = math.sin(angle)
            c = math.cos(angle)
        return Point(
            x=(self.x * c) - (self.y * s),
            y=(self.x * s) + (self.y * c)
        )

    def isclose(self, other: "Point", atol: Optional[float] = None, rtol: Optional[float] = None) -> bool:
        """
        Check if this point is approximately equal to another point.

        Each coordinate must independently satisfy |a - b| <= atol + rtol * |b|,
        where a belongs to this point and b to ``other``. The relative term
        uses ``other`` only, so ``p.isclose(q)`` and ``q.isclose(p)`` may differ.

        Args:
            other: The reference point
            atol: Absolute tolerance. If None, uses ATOL.
            rtol: Relative tolerance. If None, uses RTOL.

        Returns:
            True if both coordinates are within tolerance
        """
        return (float_isclose(self.x, other.x, atol, rtol)
                and float_isclose(self.y, other.y, atol, rtol))

    def xintercept(self, other: "Point") -> float:
        """
        Calculate the x-intercept of the infinite line through this point and another.

        A horizontal line has no intercept, and any infinite result is
        returned as +inf regardless of its sign. Two identical
        points give NaN.
        """
        intercept = self.x - ieee_divide(self.y * (other.x - self.x), other.y - self.y)
        if math.isinf(intercept):
            # "no intercept" is a single sentinel; the sign is dropped
            logger.debug("x-intercept through %s and %s is infinite", self, other)
            return math.inf
        if math.isnan(intercept):
            logger.debug("x-intercept through %s and %s is undefined", self, other)
        return intercept

    def magnitude(self) -> float:
        """Euclidean length of the point taken as a vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> "Point":
        """
        Scale the vector to unit length.

        The zero vector is not guarded against and normalizes to NaN coordinates.
        """
        magnitude = self.magnitude()
        if magnitude == 0.0:
            logger.debug("Normalizing zero-length vector %s", self)
        return self.div(magnitude)

    def dot_product(self, other: "Point") -> float:
        """Compute the dot product with another point."""
        return self.x * other.x + self.y * other.y

    def add(self, other: "Point") -> "Point":
        """Vector addition of two points."""
        return Point(x=self.x + other.x, y=self.y + other.y)

    def sub(self, other: "Point") -> "Point":
        """Vector subtraction of two points."""
        return Point(x=self.x - other.x, y=self.y - other.y)

    def __add__(self, other: "Point") -> "Point":
        return self.add(other)

    def __sub__(self, other: "Point") -> "Point":
        return self.sub(other)

    def __mul__(self, scalar: float) -> "Point":
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.mul(scalar)

    def __rmul__(self, scalar: float) -> "Point":
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.mul(scalar)

    def __truediv__(self, scalar: float) -> "Point":
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.div(scalar)

    def format_as_tuple(self) -> str:
        """Format the point as a tuple string."""
        return f"({self.x}, {self.y})"

    def __str__(self) -> str:
        """String representation of the point."""
        return self.format_as_tuple()
