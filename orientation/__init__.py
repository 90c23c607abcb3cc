"""Planar orientation angles kept in a canonical ``(-180, 180)`` range.

The package exposes :class:`Angle` and its error type.  Text rendering
(:mod:`orientation.display`) and numpy array helpers (:mod:`orientation.batch`)
are separate modules and only loaded when imported.
"""

import logging

from .angle import (
    RADIANS_90_DEGREES,
    Angle,
    Degrees,
    InvalidAngleError,
    Radians,
    normalize_degrees,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Angle",
    "InvalidAngleError",
    "Degrees",
    "Radians",
    "RADIANS_90_DEGREES",
    "normalize_degrees",
]
