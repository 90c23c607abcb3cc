"""Array helpers applying the :class:`Angle` normalization rule with numpy.

Useful when a control loop or log replay hands over many raw readings at once.
The results match :func:`orientation.angle.normalize_degrees` element for
element, boundary rule included.
"""

from __future__ import annotations

import math
from typing import Iterable, List

import numpy as np

from .angle import BOUNDARY, FULL_TURN, HALF_TURN, Angle, InvalidAngleError


def _finite_array(values) -> np.ndarray:
    arr = np.asarray(values, dtype=np.float64)
    bad = ~np.isfinite(arr)
    if bad.any():
        raise InvalidAngleError(float(arr[bad].flat[0]))
    return arr


def wrap_degrees(values) -> np.ndarray:
    """Normalize degree readings into ``(-180, 180)``."""
    r = np.fmod(_finite_array(values), FULL_TURN)
    r = np.where(r > HALF_TURN, r - FULL_TURN, r)
    r = np.where(r < -HALF_TURN, r + FULL_TURN, r)
    r = np.where(np.abs(r) == HALF_TURN, BOUNDARY, r)
    return r + 0.0


def wrap_radians(values) -> np.ndarray:
    """Normalize radian readings into ``(-pi, pi)``."""
    reduced = np.fmod(_finite_array(values), math.tau)
    return np.radians(wrap_degrees(np.degrees(reduced)))


def angles_from_degrees(values: Iterable[float]) -> List[Angle]:
    return [Angle.from_degrees(v) for v in _finite_array(list(values)).ravel()]


def angular_distances(a, b) -> np.ndarray:
    """Elementwise shortest distance in degrees between two sets of readings."""
    return np.abs(wrap_degrees(wrap_degrees(a) - wrap_degrees(b)))
