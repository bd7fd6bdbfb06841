from __future__ import annotations

import logging
from math import sqrt

from flatshapes.ellipse import Circle
from flatshapes.errors import DegenerateShapeError
from flatshapes.point import (
    Point,
    centroid
)
from flatshapes.shape import (
    require_coefficient,
    require_point,
    require_positive,
    rotated,
    scaled,
    translated
)


logger = logging.getLogger(__name__)


def _require_distinct(first_point: Point, second_point: Point) -> None:
    # Anchors a subnormal distance apart have no usable direction either
    if first_point.distance(second_point) == 0.0:
        logger.debug("Rejecting rectangle with coincident anchors %s, %s", first_point, second_point)
        raise DegenerateShapeError(f"Rectangle anchors {first_point} and {second_point} do not span a side")


def _vertices(first_point: Point, second_point: Point, second_side: float) -> tuple[Point, Point, Point, Point]:
    half = (second_point - first_point).normalize().perpendicular() * (second_side / 2)
    return (
        first_point - half,
        second_point - half,
        second_point + half,
        first_point + half,
    )


class Rectangle:
    """
    A rectangle given by two anchors and the length of the side orthogonal to them.

    The anchors are the midpoints of two opposite sides, so the side between
    them (`first_side`) has the anchors' distance as its length and the
    rectangle extends `second_side / 2` to each side of the anchor line.
    """

    __slots__ = ("_first_point", "_second_point", "_second_side")

    def __init__(self, first_point: Point, second_point: Point, second_side: float) -> None:
        first_point = require_point(first_point, "first_point")
        second_point = require_point(second_point, "second_point")
        _require_distinct(first_point, second_point)
        self._first_point = first_point
        self._second_point = second_point
        self._second_side = require_positive(second_side, "second_side")

    @property
    def first_point(self) -> Point:
        return self._first_point

    @property
    def second_point(self) -> Point:
        return self._second_point

    def vertices(self) -> tuple[Point, Point, Point, Point]:
        """Corners in counter-clockwise order."""
        return _vertices(self._first_point, self._second_point, self._second_side)

    def first_side(self) -> float:
        return self._first_point.distance(self._second_point)

    def second_side(self) -> float:
        return self._second_side

    def diagonal(self) -> float:
        return sqrt(self.first_side() ** 2 + self._second_side**2)

    def center(self) -> Point:
        return centroid(self.vertices())

    def perimeter(self) -> float:
        return 2 * (self.first_side() + self._second_side)

    def area(self) -> float:
        return self.first_side() * self._second_side

    def translate(self, new_center: Point, /) -> None:
        self._first_point, self._second_point = translated(
            (self._first_point, self._second_point), self.center(), new_center
        )

    def rotate(self, angle: float, /) -> None:
        self._first_point, self._second_point = rotated(
            (self._first_point, self._second_point), self.center(), angle
        )

    def scale(self, coefficient: float, /) -> None:
        coefficient = require_coefficient(coefficient)
        first, second = scaled((self._first_point, self._second_point), self.center(), coefficient)
        _require_distinct(first, second)
        second_side = require_positive(self._second_side * abs(coefficient), "second_side")
        self._first_point, self._second_point, self._second_side = first, second, second_side

    def __repr__(self) -> str:
        return f"Rectangle({self._first_point!r}, {self._second_point!r}, {self._second_side!r})"


class Square:
    """A square with the same anchor convention as `Rectangle`; its side is always the anchors' distance."""

    __slots__ = ("_first_point", "_second_point")

    def __init__(self, first_point: Point, second_point: Point) -> None:
        first_point = require_point(first_point, "first_point")
        second_point = require_point(second_point, "second_point")
        _require_distinct(first_point, second_point)
        self._first_point = first_point
        self._second_point = second_point

    @property
    def first_point(self) -> Point:
        return self._first_point

    @property
    def second_point(self) -> Point:
        return self._second_point

    def side(self) -> float:
        return self._first_point.distance(self._second_point)

    def first_side(self) -> float:
        return self.side()

    def second_side(self) -> float:
        return self.side()

    def vertices(self) -> tuple[Point, Point, Point, Point]:
        return _vertices(self._first_point, self._second_point, self.side())

    def diagonal(self) -> float:
        return self.side() * sqrt(2)

    def center(self) -> Point:
        return centroid(self.vertices())

    def perimeter(self) -> float:
        return 4 * self.side()

    def area(self) -> float:
        return self.side() ** 2

    def circumscribed_circle(self) -> Circle:
        return Circle(self.center(), self.diagonal() / 2)

    def inscribed_circle(self) -> Circle:
        return Circle(self.center(), self.second_side() / 2)

    def as_rectangle(self) -> Rectangle:
        return Rectangle(self._first_point, self._second_point, self.side())

    def translate(self, new_center: Point, /) -> None:
        self._first_point, self._second_point = translated(
            (self._first_point, self._second_point), self.center(), new_center
        )

    def rotate(self, angle: float, /) -> None:
        self._first_point, self._second_point = rotated(
            (self._first_point, self._second_point), self.center(), angle
        )

    def scale(self, coefficient: float, /) -> None:
        # The side follows the anchors, so there is no stored length to rescale
        first, second = scaled(
            (self._first_point, self._second_point), self.center(), require_coefficient(coefficient)
        )
        _require_distinct(first, second)
        self._first_point, self._second_point = first, second

    def __repr__(self) -> str:
        return f"Square({self._first_point!r}, {self._second_point!r})"
