"""Optional text rendering for :class:`~orientation.angle.Angle`.

The core angle type only carries a technical ``repr``.  Human-readable output
lives here so that code which never renders text does not need to import it.
Settings can be passed explicitly or read from the environment:

``ORIENTATION_DISPLAY_UNIT``
    ``degrees`` (default) or ``radians``.
``ORIENTATION_DISPLAY_PRECISION``
    Number of decimals.  Unset means the shortest round-tripping form.
``ORIENTATION_DISPLAY_SUFFIX``
    Text appended to the number.  Defaults to ``deg`` or ``rad``.

A fixed precision rounds the text, not the angle.  The boundary
representative 179.99999999999997 renders as ``180.00deg`` at two decimals,
and its negation as ``-180.0deg`` at one, even though the stored value stays
strictly inside ``(-180, 180)``.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import Mapping, Optional

from .angle import Angle

logger = logging.getLogger(__name__)

_SUFFIXES = {"degrees": "deg", "radians": "rad"}


@dataclass(frozen=True)
class DisplaySettings:
    unit: str = "degrees"
    precision: Optional[int] = None
    suffix: Optional[str] = None

    def __post_init__(self) -> None:
        if self.unit not in _SUFFIXES:
            raise ValueError(f"Unknown display unit: {self.unit}")
        if self.precision is not None and self.precision < 0:
            raise ValueError(f"Precision must be non-negative, got {self.precision}")

    @property
    def unit_suffix(self) -> str:
        return _SUFFIXES[self.unit] if self.suffix is None else self.suffix

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DisplaySettings":
        """Build settings from ``ORIENTATION_DISPLAY_*`` variables."""
        env = os.environ if environ is None else environ
        unit = env.get("ORIENTATION_DISPLAY_UNIT", "degrees").strip().lower()
        raw_precision = env.get("ORIENTATION_DISPLAY_PRECISION", "").strip()
        try:
            precision = int(raw_precision) if raw_precision else None
        except ValueError:
            raise ValueError(
                f"ORIENTATION_DISPLAY_PRECISION must be an integer, got {raw_precision!r}"
            ) from None
        settings = cls(unit=unit, precision=precision, suffix=env.get("ORIENTATION_DISPLAY_SUFFIX"))
        logger.debug("Display settings from environment: %s", settings)
        return settings


def format_angle(angle: Angle, settings: Optional[DisplaySettings] = None) -> str:
    """Render *angle* as text, e.g. ``"90.0deg"``."""
    settings = settings or DisplaySettings()
    value = angle.to_degrees() if settings.unit == "degrees" else angle.to_radians()
    if settings.precision is None:
        number = repr(value)
    else:
        number = f"{value:.{settings.precision}f}"
    return f"{number}{settings.unit_suffix}"


class AngleText:
    """Adapter giving an :class:`Angle` a human-readable ``str``."""

    def __init__(self, angle: Angle, settings: Optional[DisplaySettings] = None) -> None:
        self.angle = angle
        self.settings = settings

    def __str__(self) -> str:
        return format_angle(self.angle, self.settings)

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"AngleText({self.angle!r})"
