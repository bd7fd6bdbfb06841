from __future__ import annotations

import logging
import math
from typing import (
    Protocol,
    runtime_checkable
)

from flatshapes.errors import InvalidArgumentError
from flatshapes.point import Point


logger = logging.getLogger(__name__)


@runtime_checkable
class Shape(Protocol):
    """
    What every shape can answer and how every shape can be moved.

    Queries are recomputed from the current anchors on each call.
    Transforms work in place, about the shape's own `center()`, and either
    apply completely or raise before touching anything.
    """

    def center(self) -> Point:
        ...

    def perimeter(self) -> float:
        ...

    def area(self) -> float:
        ...

    def translate(self, new_center: Point, /) -> None:
        ...

    def rotate(self, angle: float, /) -> None:
        ...

    def scale(self, coefficient: float, /) -> None:
        ...


def require_point(point: Point, name: str) -> Point:
    if not isinstance(point, Point):
        raise InvalidArgumentError(f"{name} must be a Point, got {type(point).__name__}")
    if not point.is_finite():
        raise InvalidArgumentError(f"{name} must have finite coordinates, got {point!r}")
    return point


def require_positive(value: float, name: str) -> float:
    if not math.isfinite(value) or value <= 0.0:
        logger.debug("Rejecting %s=%r", name, value)
        raise InvalidArgumentError(f"{name} must be a finite positive number, got {value!r}")
    return float(value)


def require_angle(angle: float) -> float:
    if not math.isfinite(angle):
        raise InvalidArgumentError(f"Rotation angle must be finite, got {angle!r}")
    return float(angle)


def require_coefficient(coefficient: float) -> float:
    # A zero coefficient collapses every shape into a degenerate one
    if not math.isfinite(coefficient) or coefficient == 0.0:
        logger.debug("Rejecting scale coefficient %r", coefficient)
        raise InvalidArgumentError(f"Scale coefficient must be finite and non-zero, got {coefficient!r}")
    return float(coefficient)


def _finite(anchors: tuple[Point, ...]) -> tuple[Point, ...]:
    for anchor in anchors:
        if not anchor.is_finite():
            logger.debug("Transform would move an anchor to %r", anchor)
            raise InvalidArgumentError(f"Transform would move an anchor to {anchor!r}")
    return anchors


def translated(anchors: tuple[Point, ...], center: Point, new_center: Point) -> tuple[Point, ...]:
    shift = require_point(new_center, "new_center") - center
    return _finite(tuple(anchor + shift for anchor in anchors))


def rotated(anchors: tuple[Point, ...], center: Point, angle: float) -> tuple[Point, ...]:
    angle = require_angle(angle)
    return _finite(tuple(center + (anchor - center).rotate(angle) for anchor in anchors))


def scaled(anchors: tuple[Point, ...], center: Point, coefficient: float) -> tuple[Point, ...]:
    """`coefficient` must already have passed `require_coefficient`."""
    return _finite(tuple(center + (anchor - center) * coefficient for anchor in anchors))
