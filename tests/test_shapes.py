from math import pi

import pytest

from flatshapes.ellipse import (
    Circle,
    Ellipse
)
from flatshapes.errors import (
    DegenerateShapeError,
    InvalidArgumentError
)
from flatshapes.point import Point
from flatshapes.rectangle import (
    Rectangle,
    Square
)
from flatshapes.shape import Shape
from flatshapes.triangle import Triangle


SHAPE_FACTORIES = {
    "ellipse": lambda: Ellipse(Point(1.0, 5.0), Point(3.0, 7.0), 0.5),
    "circle": lambda: Circle(Point(-2.0, 3.0), 1.5),
    "rectangle": lambda: Rectangle(Point(1.0, 1.0), Point(4.0, 5.0), 2.0),
    "square": lambda: Square(Point(-1.0, 0.5), Point(2.0, -1.0)),
    "triangle": lambda: Triangle(Point(-2.0, 1.0), Point(5.0, -3.0), Point(2.5, 6.0)),
}


@pytest.fixture(params=list(SHAPE_FACTORIES), ids=list(SHAPE_FACTORIES))
def shape(request):
    return SHAPE_FACTORIES[request.param]()


def outline(shape) -> tuple[Point, ...]:
    match shape:
        case Circle():
            return (shape.center(),)
        case Ellipse():
            return (shape.first_focus, shape.second_focus)
        case _:
            return tuple(shape.vertices())


def assert_same_outline(left: tuple[Point, ...], right: tuple[Point, ...]) -> None:
    assert len(left) == len(right)
    for ours, theirs in zip(left, right):
        assert ours.x == pytest.approx(theirs.x, rel=1e-9, abs=1e-9)
        assert ours.y == pytest.approx(theirs.y, rel=1e-9, abs=1e-9)


def test_every_shape_satisfies_the_protocol(shape):
    assert isinstance(shape, Shape)
    assert shape.perimeter() > 0.0
    assert shape.area() > 0.0


def test_translate_moves_center(shape):
    target = Point(10.0, -20.0)

    shape.translate(target)

    assert shape.center().x == pytest.approx(target.x, rel=1e-9)
    assert shape.center().y == pytest.approx(target.y, rel=1e-9)


def test_translate_round_trip(shape):
    original = shape.center()
    before = outline(shape)

    shape.translate(Point(123.5, -7.25))
    shape.translate(original)

    assert shape.center().x == pytest.approx(original.x, rel=1e-9)
    assert shape.center().y == pytest.approx(original.y, rel=1e-9)
    assert_same_outline(outline(shape), before)


@pytest.mark.parametrize("angle", [0.3, pi / 2, -2.0, 3 * pi])
def test_rotate_round_trip(shape, angle):
    before = outline(shape)

    shape.rotate(angle)
    shape.rotate(-angle)

    assert_same_outline(outline(shape), before)


def test_rotate_keeps_center(shape):
    center = shape.center()

    shape.rotate(1.1)

    assert shape.center().x == pytest.approx(center.x, rel=1e-9, abs=1e-9)
    assert shape.center().y == pytest.approx(center.y, rel=1e-9, abs=1e-9)


def test_rigid_transforms_keep_size(shape):
    area = shape.area()
    perimeter = shape.perimeter()

    shape.translate(Point(-3.0, 8.0))
    shape.rotate(0.9)

    assert shape.area() == pytest.approx(area, rel=1e-9)
    assert shape.perimeter() == pytest.approx(perimeter, rel=1e-9)


@pytest.mark.parametrize("coefficient", [2.0, 0.25, -3.0])
def test_scale_law(shape, coefficient):
    area = shape.area()
    perimeter = shape.perimeter()
    center = shape.center()

    shape.scale(coefficient)

    assert shape.area() == pytest.approx(coefficient**2 * area, rel=1e-9)
    assert shape.perimeter() == pytest.approx(abs(coefficient) * perimeter, rel=1e-9)
    assert shape.center().x == pytest.approx(center.x, rel=1e-9, abs=1e-9)
    assert shape.center().y == pytest.approx(center.y, rel=1e-9, abs=1e-9)


@pytest.mark.parametrize(
    "transform",
    [
        lambda s: s.scale(0.0),
        lambda s: s.scale(float("nan")),
        lambda s: s.scale(float("inf")),
        lambda s: s.rotate(float("nan")),
        lambda s: s.translate(Point(float("inf"), 0.0)),
    ],
    ids=["scale-zero", "scale-nan", "scale-inf", "rotate-nan", "translate-inf"],
)
def test_failed_transform_leaves_shape_untouched(shape, transform):
    before = outline(shape)
    area = shape.area()

    with pytest.raises(InvalidArgumentError):
        transform(shape)

    assert outline(shape) == before
    assert shape.area() == area


@pytest.mark.parametrize("name", ["rectangle", "square", "triangle"])
def test_scale_that_collapses_anchors_is_rejected(name):
    shape = SHAPE_FACTORIES[name]()
    before = outline(shape)
    area = shape.area()

    with pytest.raises(DegenerateShapeError):
        shape.scale(1e-300)

    assert outline(shape) == before
    assert shape.area() == area

    shape.scale(2.0)
    assert shape.area() == pytest.approx(4 * area)


def test_derived_circles_are_snapshots():
    square = Square(Point(0.0, 0.0), Point(2.0, 0.0))
    triangle = Triangle(Point(0.0, 0.0), Point(4.0, 0.0), Point(0.0, 3.0))
    circles = [square.inscribed_circle(), triangle.circumscribed_circle()]

    for circle in circles:
        circle.translate(Point(100.0, 100.0))
        circle.scale(10.0)

    assert square.center() == Point(1.0, 0.0)
    assert square.area() == 4.0
    assert triangle.area() == 6.0
    assert triangle.circumscribed_circle().radius() == pytest.approx(2.5)


def test_repr_mentions_anchors():
    assert repr(Circle(Point(1.0, 2.0), 3.0)) == "Circle(Point(x=1.0, y=2.0), 3.0)"
    assert repr(Square(Point(0.0, 0.0), Point(1.0, 0.0))) == "Square(Point(x=0.0, y=0.0), Point(x=1.0, y=0.0))"
    assert "Triangle(" in repr(Triangle(Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0)))
