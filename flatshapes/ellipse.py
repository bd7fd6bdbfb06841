from __future__ import annotations

import logging
from math import (
    pi,
    sqrt
)

from flatshapes.errors import (
    DegenerateShapeError,
    InvalidArgumentError
)
from flatshapes.point import Point
from flatshapes.shape import (
    require_angle,
    require_coefficient,
    require_point,
    require_positive,
    rotated,
    scaled,
    translated
)


logger = logging.getLogger(__name__)


def approximate_perimeter(major: float, minor: float) -> float:
    """
    4 (pi a b + (a - b)^2) / (a + b).

    Exact for a circle and homogeneous of degree one, so it scales
    linearly with the ellipse.
    """
    return 4 * (pi * major * minor + (major - minor) ** 2) / (major + minor)


class Ellipse:
    """
    An ellipse given by its two foci and the perifocal distance,
    i.e. the distance from a focus to the nearest end of the major axis.
    """

    __slots__ = ("_first_focus", "_second_focus", "_perifocus")

    def __init__(self, first_focus: Point, second_focus: Point, perifocus: float) -> None:
        self._first_focus = require_point(first_focus, "first_focus")
        self._second_focus = require_point(second_focus, "second_focus")
        self._perifocus = require_positive(perifocus, "perifocus")

    @classmethod
    def from_eccentricity(cls, first_focus: Point, second_focus: Point, eccentricity: float) -> Ellipse:
        if not 0.0 < eccentricity < 1.0:
            raise InvalidArgumentError(f"Eccentricity must lie in (0, 1), got {eccentricity!r}")
        first_focus = require_point(first_focus, "first_focus")
        second_focus = require_point(second_focus, "second_focus")
        focal_distance = first_focus.distance(second_focus) / 2
        if focal_distance == 0.0:
            # With coincident foci the eccentricity says nothing about the size
            logger.debug("Cannot size an ellipse from eccentricity with coincident foci")
            raise DegenerateShapeError("Foci must be distinct to build an ellipse from its eccentricity")
        major = focal_distance / eccentricity
        return cls(first_focus, second_focus, major - focal_distance)

    @property
    def first_focus(self) -> Point:
        return self._first_focus

    @property
    def second_focus(self) -> Point:
        return self._second_focus

    @property
    def perifocus(self) -> float:
        return self._perifocus

    def focal_distance(self) -> float:
        """Half the distance between the foci (c)."""
        return self._first_focus.distance(self._second_focus) / 2

    def major_semi_axis(self) -> float:
        return self.focal_distance() + self._perifocus

    def minor_semi_axis(self) -> float:
        a = self.major_semi_axis()
        c = self.focal_distance()
        return sqrt(a**2 - c**2)

    def eccentricity(self) -> float:
        return self.focal_distance() / self.major_semi_axis()

    def apoapsis(self) -> float:
        """Distance from a focus to the farthest end of the major axis."""
        return self.major_semi_axis() + self.focal_distance()

    def center(self) -> Point:
        return self._first_focus.midpoint(self._second_focus)

    def perimeter(self) -> float:
        return approximate_perimeter(self.major_semi_axis(), self.minor_semi_axis())

    def area(self) -> float:
        return pi * self.major_semi_axis() * self.minor_semi_axis()

    def translate(self, new_center: Point, /) -> None:
        self._first_focus, self._second_focus = translated(
            (self._first_focus, self._second_focus), self.center(), new_center
        )

    def rotate(self, angle: float, /) -> None:
        self._first_focus, self._second_focus = rotated(
            (self._first_focus, self._second_focus), self.center(), angle
        )

    def scale(self, coefficient: float, /) -> None:
        coefficient = require_coefficient(coefficient)
        # Foci and perifocus scale together, otherwise the eccentricity drifts
        first, second = scaled((self._first_focus, self._second_focus), self.center(), coefficient)
        perifocus = require_positive(self._perifocus * abs(coefficient), "perifocus")
        self._first_focus, self._second_focus, self._perifocus = first, second, perifocus

    def __repr__(self) -> str:
        return f"Ellipse({self._first_focus!r}, {self._second_focus!r}, {self._perifocus!r})"


class Circle:
    """
    A circle, i.e. an ellipse whose foci coincide with its center.

    Stores the center and radius directly and answers the ellipse
    queries with their degenerate values.
    """

    __slots__ = ("_center", "_radius")

    def __init__(self, center: Point, radius: float) -> None:
        self._center = require_point(center, "center")
        self._radius = require_positive(radius, "radius")

    def radius(self) -> float:
        return self._radius

    @property
    def first_focus(self) -> Point:
        return self._center

    @property
    def second_focus(self) -> Point:
        return self._center

    @property
    def perifocus(self) -> float:
        return self._radius

    def focal_distance(self) -> float:
        return 0.0

    def major_semi_axis(self) -> float:
        return self._radius

    def minor_semi_axis(self) -> float:
        return self._radius

    def eccentricity(self) -> float:
        return 0.0

    def diameter(self) -> float:
        return 2 * self._radius

    def center(self) -> Point:
        return self._center

    def perimeter(self) -> float:
        return 2 * pi * self._radius

    def area(self) -> float:
        return pi * self._radius**2

    def translate(self, new_center: Point, /) -> None:
        self._center = require_point(new_center, "new_center")

    def rotate(self, angle: float, /) -> None:
        # Rotation about its own center leaves a circle unchanged
        require_angle(angle)

    def scale(self, coefficient: float, /) -> None:
        coefficient = require_coefficient(coefficient)
        self._radius = require_positive(self._radius * abs(coefficient), "radius")

    def as_ellipse(self) -> Ellipse:
        return Ellipse(self._center, self._center, self._radius)

    def __repr__(self) -> str:
        return f"Circle({self._center!r}, {self._radius!r})"
