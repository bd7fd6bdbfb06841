class GeometryError(Exception):
    """Base class for everything flatshapes raises on malformed geometry."""


class ZeroLengthError(GeometryError, ZeroDivisionError):
    """A division by a zero length: normalizing a null vector and the like."""


class DegenerateShapeError(GeometryError, ValueError):
    """The input points do not span a proper shape (collinear, coincident...)."""


class InvalidArgumentError(GeometryError, ValueError):
    pass
