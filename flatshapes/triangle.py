from __future__ import annotations

import logging
from math import (
    acos,
    sqrt
)

from flatshapes.config import (
    DEFAULT_SETTINGS,
    Settings
)
from flatshapes.ellipse import Circle
from flatshapes.errors import (
    DegenerateShapeError,
    ZeroLengthError
)
from flatshapes.point import (
    Point,
    centroid
)
from flatshapes.shape import (
    require_coefficient,
    require_point,
    rotated,
    scaled,
    translated
)


logger = logging.getLogger(__name__)


def _heron_radicand(a: float, b: float, c: float) -> float:
    """
    Sixteen times the squared area, in the cancellation-free arrangement
    of Heron's formula (sides sorted so that a >= b >= c).
    """
    a, b, c = sorted((a, b, c), reverse=True)
    return (a + (b + c)) * (c - (a - b)) * (c + (a - b)) * (a + (b - c))


def _check_proper(first: Point, second: Point, third: Point, tolerance: float) -> None:
    u = second - first
    v = third - first
    collinear = abs(u.cross(v)) <= tolerance * u.length() * v.length()
    # Thinner than the side lengths can resolve: area() would have nothing to work with
    if collinear or _heron_radicand(second.distance(third), third.distance(first), first.distance(second)) <= 0.0:
        logger.debug("Rejecting collinear triangle %s, %s, %s", first, second, third)
        raise DegenerateShapeError(f"Triangle vertices {first}, {second}, {third} are collinear")


def _clamp(value: float) -> float:
    return max(-1.0, min(1.0, value))


class Triangle:
    """
    A triangle given by its three vertices.

    Sides follow the opposite-vertex convention: `first_side` is the side
    facing `first_point` (between the second and third vertices), and so on.
    Side lengths are measured from the current vertices on every call.
    """

    __slots__ = ("_first_point", "_second_point", "_third_point", "_settings")

    def __init__(
        self,
        first_point: Point,
        second_point: Point,
        third_point: Point,
        *,
        settings: Settings = DEFAULT_SETTINGS,
    ) -> None:
        first_point = require_point(first_point, "first_point")
        second_point = require_point(second_point, "second_point")
        third_point = require_point(third_point, "third_point")
        _check_proper(first_point, second_point, third_point, settings.collinearity_tolerance)
        self._first_point = first_point
        self._second_point = second_point
        self._third_point = third_point
        self._settings = settings

    @property
    def first_point(self) -> Point:
        return self._first_point

    @property
    def second_point(self) -> Point:
        return self._second_point

    @property
    def third_point(self) -> Point:
        return self._third_point

    def vertices(self) -> tuple[Point, Point, Point]:
        return (self._first_point, self._second_point, self._third_point)

    def first_side(self) -> float:
        return self._second_point.distance(self._third_point)

    def second_side(self) -> float:
        return self._third_point.distance(self._first_point)

    def third_side(self) -> float:
        return self._first_point.distance(self._second_point)

    def sides(self) -> tuple[float, float, float]:
        return (self.first_side(), self.second_side(), self.third_side())

    def angles(self) -> tuple[float, float, float]:
        """Interior angles in radians, at the first, second and third vertex."""
        a, b, c = self.sides()
        return (
            acos(_clamp((b**2 + c**2 - a**2) / (2 * b * c))),
            acos(_clamp((c**2 + a**2 - b**2) / (2 * c * a))),
            acos(_clamp((a**2 + b**2 - c**2) / (2 * a * b))),
        )

    def center(self) -> Point:
        return centroid(self.vertices())

    def perimeter(self) -> float:
        return sum(self.sides())

    def area(self) -> float:
        radicand = _heron_radicand(*self.sides())
        if radicand <= 0.0:
            logger.debug("Heron radicand %r is not positive for %r", radicand, self)
            raise DegenerateShapeError(f"{self!r} has no positive area")
        return sqrt(radicand) / 4

    def circumscribed_circle(self) -> Circle:
        A, B, C = self.vertices()
        denominator = 2 * (A.x * (B.y - C.y) + B.x * (C.y - A.y) + C.x * (A.y - B.y))
        if denominator == 0.0:
            logger.debug("Circumcenter denominator vanished for %r", self)
            raise DegenerateShapeError(f"{self!r} has no circumscribed circle")

        a2 = A.length_squared()
        b2 = B.length_squared()
        c2 = C.length_squared()
        x = (a2 * (B.y - C.y) + b2 * (C.y - A.y) + c2 * (A.y - B.y)) / denominator
        y = (a2 * (C.x - B.x) + b2 * (A.x - C.x) + c2 * (B.x - A.x)) / denominator

        a, b, c = self.sides()
        return Circle(Point(x, y), (a * b * c) / (4 * self.area()))

    def inscribed_circle(self) -> Circle:
        a, b, c = self.sides()
        perimeter = a + b + c
        if perimeter == 0.0:
            raise ZeroLengthError(f"{self!r} has zero perimeter")
        # Each vertex is weighted by the side facing it
        incenter = (self._first_point * a + self._second_point * b + self._third_point * c) / perimeter
        return Circle(incenter, 2 * self.area() / perimeter)

    def orthocenter(self) -> Point:
        """
        Intersection of the altitudes.

        The altitude from the first vertex satisfies H . (C - B) = A . (C - B)
        and the one from the second H . (C - A) = B . (C - A); the 2x2 system
        is solved by Cramer's rule.
        """
        A, B, C = self.vertices()
        u = C - B
        v = C - A
        c1 = A.dot(u)
        c2 = B.dot(v)

        delta = u.cross(v)
        if delta == 0.0:
            logger.debug("Altitude system is singular for %r", self)
            raise DegenerateShapeError(f"{self!r} has no orthocenter")
        return Point((c1 * v.y - c2 * u.y) / delta, (c2 * u.x - c1 * v.x) / delta)

    def nine_points_circle(self) -> Circle:
        circumscribed = self.circumscribed_circle()
        center = circumscribed.center().midpoint(self.orthocenter())
        return Circle(center, circumscribed.radius() / 2)

    def _move_to(self, vertices: tuple[Point, ...]) -> None:
        # Rounding can flatten a thin triangle, so the new vertices are checked like fresh input
        first, second, third = vertices
        _check_proper(first, second, third, self._settings.collinearity_tolerance)
        self._first_point, self._second_point, self._third_point = first, second, third

    def translate(self, new_center: Point, /) -> None:
        self._move_to(translated(self.vertices(), self.center(), new_center))

    def rotate(self, angle: float, /) -> None:
        self._move_to(rotated(self.vertices(), self.center(), angle))

    def scale(self, coefficient: float, /) -> None:
        self._move_to(scaled(self.vertices(), self.center(), require_coefficient(coefficient)))

    def __repr__(self) -> str:
        return f"Triangle({self._first_point!r}, {self._second_point!r}, {self._third_point!r})"
