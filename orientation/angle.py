"""Planar orientation angle.

:class:`Angle` stores a single measure in degrees and keeps it inside the open
interval ``(-180, 180)`` at all times.  Every construction path, including the
dataclass constructor, runs the value through :func:`normalize_degrees`, so an
instance can never hold an out-of-range or non-finite value.

The full-turn reduction uses one :func:`math.fmod`, which is exact for IEEE
floats, followed by at most one exact add or subtract of 360.  The two
boundary values 180 and -180 describe the same orientation and both map to
``math.nextafter(180.0, 0.0)``, the largest float strictly below 180.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
import logging
import math
import numbers

logger = logging.getLogger(__name__)

Degrees = float
Radians = float

RADIANS_90_DEGREES: Radians = math.pi / 2

FULL_TURN: Degrees = 360.0
HALF_TURN: Degrees = 180.0
# Canonical representative of the +/-180 boundary.
BOUNDARY: Degrees = math.nextafter(HALF_TURN, 0.0)


class InvalidAngleError(ValueError):
    """Raised when an angle is built from NaN or an infinite value."""

    def __init__(self, value: float) -> None:
        super().__init__(f"Cannot build an angle from non-finite value {value!r}")
        self.value = value


def _as_finite(value: object, full_turn: float = FULL_TURN) -> float:
    if isinstance(value, Angle) or not isinstance(value, numbers.Real):
        raise TypeError(f"Expected a real number, got {type(value).__name__}")
    try:
        value = float(value)
    except OverflowError:
        # ints and fractions beyond the float range are reduced exactly first
        if not isinstance(value, numbers.Rational):
            raise InvalidAngleError(value) from None
        exact = Fraction(value.numerator, value.denominator)
        value = float(exact % Fraction(full_turn))
    if not math.isfinite(value):
        logger.debug("Rejecting non-finite angle input %r", value)
        raise InvalidAngleError(value)
    return value


def normalize_degrees(value: float) -> Degrees:
    """Reduce a finite degree value into ``(-180, 180)``."""
    r = math.fmod(_as_finite(value), FULL_TURN)
    if r > HALF_TURN:
        r -= FULL_TURN
    elif r < -HALF_TURN:
        r += FULL_TURN
    if r == HALF_TURN or r == -HALF_TURN:
        return BOUNDARY
    # folds -0.0 into 0.0
    return r + 0.0


@dataclass(frozen=True)
class Angle:
    """An orientation in the plane, stored in degrees.

    Use :meth:`from_degrees` or :meth:`from_radians` to build one.  Arithmetic
    returns new instances; nothing mutates an existing angle.
    """

    degrees: Degrees = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "degrees", normalize_degrees(self.degrees))

    # ------------------------------------------------------------------
    # Constructors / conversions
    # ------------------------------------------------------------------
    @classmethod
    def from_degrees(cls, value: Degrees) -> "Angle":
        return cls(value)

    @classmethod
    def from_radians(cls, value: Radians) -> "Angle":
        # reduce first so huge finite inputs cannot overflow in the conversion
        return cls(math.degrees(math.fmod(_as_finite(value, math.tau), math.tau)))

    def to_degrees(self) -> Degrees:
        return self.degrees

    def to_radians(self) -> Radians:
        return math.radians(self.degrees)

    @property
    def radians(self) -> Radians:
        """Return the angle in radians, inside ``(-pi, pi)``."""
        return self.to_radians()

    def __float__(self) -> float:
        return self.to_radians()

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def add(self, other: "Angle") -> "Angle":
        return Angle(self.degrees + other.degrees)

    def sub(self, other: "Angle") -> "Angle":
        return self.add(other.negate())

    def negate(self) -> "Angle":
        return Angle(-self.degrees)

    def abs(self) -> "Angle":
        """Return the magnitude of the normalized value as an angle."""
        return Angle(abs(self.degrees))

    def __add__(self, other: object) -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return self.sub(other)

    def __neg__(self) -> "Angle":
        return self.negate()

    def __abs__(self) -> "Angle":
        return self.abs()

    # ------------------------------------------------------------------
    # Trigonometry and comparison
    # ------------------------------------------------------------------
    def cos(self) -> float:
        return math.cos(self.to_radians())

    def sin(self) -> float:
        return math.sin(self.to_radians())

    def distance_to(self, other: "Angle") -> Degrees:
        """Return the shortest angular distance to *other* in degrees.

        Subtraction already resolves the wraparound, so the magnitude of the
        normalized difference is the shortest path around the circle.
        """
        return abs(self.sub(other).degrees)

    def is_within(self, other: "Angle", tolerance: "Degrees | Angle") -> bool:
        """Return ``True`` if *other* lies within *tolerance* of this angle.

        *tolerance* is in degrees, or an :class:`Angle` whose magnitude is
        used.  The comparison is inclusive.
        """
        if isinstance(tolerance, Angle):
            limit = abs(tolerance.degrees)
        else:
            limit = float(tolerance)
            if math.isnan(limit) or limit < 0:
                raise ValueError(f"Tolerance must be a non-negative number, got {tolerance!r}")
        return self.distance_to(other) <= limit

    def __repr__(self) -> str:
        return f"Angle(degrees={self.degrees!r})"
