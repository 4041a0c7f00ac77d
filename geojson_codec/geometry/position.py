"""
Position Value Type
===================

A single coordinate tuple: longitude, latitude and an optional altitude.

Design:
- Immutable (frozen dataclass)
- Longitude first, always (the wire order is [lon, lat(, alt)])
- Values stored as float; booleans and non-finite numbers rejected
- No lon/lat range check: projected CRSs carry arbitrary magnitudes
"""

import math
from dataclasses import dataclass
from numbers import Real
from typing import Optional, Tuple

from ..errors import MissingFieldError, OutOfRangeError


def is_number(value) -> bool:
    """True for real numbers that are not booleans."""
    return isinstance(value, Real) and not isinstance(value, bool)


def _coerce(field: str, value) -> float:
    if value is None:
        raise MissingFieldError(field)
    if not is_number(value):
        raise OutOfRangeError(field, f"must be a number, got {value!r}")
    try:
        result = float(value)
    except OverflowError:
        raise OutOfRangeError(field, "must be finite, got an integer too large for a float")
    if not math.isfinite(result):
        raise OutOfRangeError(field, f"must be finite, got {value!r}")
    return result


@dataclass(frozen=True)
class Position:
    """
    Immutable geographic position.

    Attributes:
        longitude: Easting / longitude (first on the wire)
        latitude: Northing / latitude (second on the wire)
        altitude: Optional height (third on the wire)

    Invariants:
        - longitude and latitude present, finite numbers
        - altitude None or a finite number

    Example:
        >>> pos = Position(longitude=-122.428938, latitude=37.766713)
        >>> pos.to_tuple()
        (-122.428938, 37.766713)
    """
    longitude: float
    latitude: float
    altitude: Optional[float] = None

    def __post_init__(self):
        """Validate and normalise to floats."""
        object.__setattr__(self, 'longitude', _coerce('longitude', self.longitude))
        object.__setattr__(self, 'latitude', _coerce('latitude', self.latitude))
        if self.altitude is not None:
            object.__setattr__(self, 'altitude', _coerce('altitude', self.altitude))

    @property
    def has_altitude(self) -> bool:
        return self.altitude is not None

    def to_tuple(self) -> Tuple[float, ...]:
        """Coordinates in wire order."""
        if self.altitude is None:
            return (self.longitude, self.latitude)
        return (self.longitude, self.latitude, self.altitude)

    def without_altitude(self) -> 'Position':
        if self.altitude is None:
            return self
        return Position(self.longitude, self.latitude)
