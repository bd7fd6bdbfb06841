from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass
from math import (
    cos,
    sin,
    sqrt
)

from flatshapes.config import DEFAULT_SETTINGS
from flatshapes.errors import (
    InvalidArgumentError,
    ZeroLengthError
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Point:
    """
    A position on the plane, or a free vector when used as a displacement.

    Every operation returns a new Point.
    """

    x: float
    y: float

    @staticmethod
    def origin() -> Point:
        return Point(0.0, 0.0)

    def add(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def subtract(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def multiply(self, coefficient: float) -> Point:
        return Point(self.x * coefficient, self.y * coefficient)

    def divide(self, divisor: float) -> Point:
        if divisor == 0:
            raise ZeroLengthError(f"Cannot divide {self} by zero")
        return Point(self.x / divisor, self.y / divisor)

    def __add__(self, other: Point) -> Point:
        return self.add(other)

    def __sub__(self, other: Point) -> Point:
        return self.subtract(other)

    def __mul__(self, other: float) -> Point:
        return self.multiply(other)

    def __rmul__(self, other: float) -> Point:
        return self.multiply(other)

    def __truediv__(self, other: float) -> Point:
        return self.divide(other)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def dot(self, other: Point) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Point) -> float:
        """
        Z component of the cross product of two vectors lying in the plane.
        Positive when `other` is counter-clockwise from `self`.
        """
        return self.x * other.y - self.y * other.x

    def rotate(self, angle: float) -> Point:
        """Rotate counter-clockwise about the origin by `angle` radians."""
        c = cos(angle)
        s = sin(angle)
        return Point(self.x * c - self.y * s, self.x * s + self.y * c)

    def perpendicular(self) -> Point:
        """Same as `rotate(pi / 2)`, without the rounding."""
        return Point(-self.y, self.x)

    def length_squared(self) -> float:
        return self.x**2 + self.y**2

    def length(self) -> float:
        return sqrt(self.x**2 + self.y**2)

    def distance(self, other: Point) -> float:
        return (self - other).length()

    def normalize(self) -> Point:
        length = self.length()
        if length == 0.0:
            logger.debug("Refusing to normalize a zero-length vector")
            raise ZeroLengthError("Cannot normalize a zero-length vector")
        return Point(self.x / length, self.y / length)

    def midpoint(self, other: Point) -> Point:
        return Point((self.x + other.x) / 2, (self.y + other.y) / 2)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def is_close(
        self,
        other: Point,
        *,
        rel_tol: float = DEFAULT_SETTINGS.rel_tol,
        abs_tol: float = DEFAULT_SETTINGS.abs_tol,
    ) -> bool:
        return math.isclose(self.x, other.x, rel_tol=rel_tol, abs_tol=abs_tol) and math.isclose(
            self.y, other.y, rel_tol=rel_tol, abs_tol=abs_tol
        )

    def __str__(self) -> str:
        return f"({self.x:.2f}; {self.y:.2f})"


def centroid(points: Iterable[Point]) -> Point:
    """Arithmetic mean of the given points."""
    total = Point.origin()
    count = 0
    for point in points:
        total += point
        count += 1
    if count == 0:
        raise InvalidArgumentError("Cannot take the centroid of no points")
    return total / count
