from __future__ import annotations

import math
from collections.abc import Mapping

from adaptix import Retort
from attr import frozen

from flatshapes.errors import InvalidArgumentError


@frozen
class Settings:
    # Relative to the product of the two edge lengths meeting at a vertex
    collinearity_tolerance: float = 1e-12
    rel_tol: float = 1e-9
    abs_tol: float = 1e-12


DEFAULT_SETTINGS = Settings()

retort = Retort()


def load_settings(data: Mapping[str, object]) -> Settings:
    """
    Build `Settings` from a plain mapping, e.g. a parsed config section.

    Missing keys fall back to the defaults. Raises adaptix's `LoadError` if the
    mapping has the wrong shape and `InvalidArgumentError` if a value is out of range.
    """
    settings = retort.load(dict(data), Settings)
    for name in ("collinearity_tolerance", "rel_tol", "abs_tol"):
        value = getattr(settings, name)
        if not math.isfinite(value) or value < 0.0:
            raise InvalidArgumentError(f"{name} must be a finite non-negative number, got {value!r}")
    return settings
