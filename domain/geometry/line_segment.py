# domain/geometry/line_segment.py
from typing import Optional
from pydantic import Field
from domain.geometry.point import Point
from utils.base_model import ImmutableModel


class LineSegment(ImmutableModel):
    """
    Represents a finite line segment defined by an ordered pair of points.

    Degenerate segments with identical endpoints are permitted.
    """
    p1: Point = Field(description="First endpoint of the segment")
    p2: Point = Field(description="Second endpoint of the segment")

    def isclose(self, other: "LineSegment", atol: Optional[float] = None, rtol: Optional[float] = None) -> bool:
        """
        Check if this segment is approximately equal to another segment.

        Endpoints are compared positionally, first to first and second to
        second, so a segment is not close to its own reversal.
        """
        return (self.p1.isclose(other.p1, atol, rtol)
                and self.p2.isclose(other.p2, atol, rtol))

    def __str__(self) -> str:
        """String representation of the segment."""
        return f"LineSegment({self.p1} -> {self.p2})"
