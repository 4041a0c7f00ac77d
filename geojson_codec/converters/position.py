"""
Position / Coordinate Codec
===========================

Converts between raw numeric arrays and Position values, at the nesting
depth the owning geometry needs:

    depth 1: [lon, lat]                    -> Position
    depth 2: [[lon, lat], ...]             -> (Position, ...)
    depth 3: [[[lon, lat], ...], ...]      -> ((Position, ...), ...)

Only shape and token checks happen here. Minimum counts, closure and ring
rules belong to the geometry constructors.
"""

from enum import Enum
from typing import Any, Tuple

from ..errors import ConstructionError, ParseError, UnsupportedTypeError
from ..geometry.position import Position, is_number
from .base import JsonConverter

EXPECTED_SHAPE = "Expected something like '[-122.428938, 37.766713]' ([lon, lat]) or [lon, lat, alt]"

# Target type for a flat run of positions ([[lon, lat], ...])
Positions = Tuple[Position, ...]


class AltitudePolicy(str, Enum):
    """What to do with a third coordinate token."""
    PRESERVE = "preserve"   # store and round-trip it
    DROP = "drop"           # validate, then discard
    REJECT = "reject"       # two tokens only


def _is_array(raw: Any) -> bool:
    return isinstance(raw, (list, tuple))


def decode_position(raw: Any, altitude: AltitudePolicy = AltitudePolicy.PRESERVE) -> Position:
    """
    Read one [lon, lat(, alt)] array.

    Raises:
        ParseError: Wrong arity, non-numeric or non-finite token
    """
    if not _is_array(raw) or len(raw) not in (2, 3):
        raise ParseError(
            f"Position could not be parsed. {EXPECTED_SHAPE}, received: {raw!r}",
            raw
        )

    if len(raw) == 3 and altitude == AltitudePolicy.REJECT:
        raise ParseError(
            f"Position could not be parsed. Altitude is not accepted, expected [lon, lat], received: {raw!r}",
            raw
        )

    for index, token in enumerate(raw):
        if not is_number(token):
            raise ParseError(
                f"Position token {index} is not a number: {token!r} (in {raw!r})",
                raw
            )

    try:
        position = Position(*raw)
    except ConstructionError as e:
        raise ParseError(f"Position could not be parsed: {e}", raw) from e

    if altitude == AltitudePolicy.DROP:
        return position.without_altitude()
    return position


def decode_coordinates(raw: Any, depth: int, altitude: AltitudePolicy = AltitudePolicy.PRESERVE):
    """
    Read a coordinates member nested `depth` levels deep.

    Raises:
        ParseError: If the nesting does not match `depth`
    """
    if depth < 1:
        raise ValueError(f"depth must be >= 1, got {depth}")
    if depth == 1:
        return decode_position(raw, altitude)

    if not _is_array(raw):
        raise ParseError(
            f"Coordinates could not be parsed. Expected an array nested {depth} levels deep, received: {raw!r}",
            raw
        )
    if any(is_number(item) for item in raw):
        raise ParseError(
            f"Coordinates could not be parsed. Expected an array nested {depth} levels deep, "
            f"found a bare number in: {raw!r}",
            raw
        )
    return tuple(decode_coordinates(item, depth - 1, altitude) for item in raw)


def encode_position(position: Position) -> list:
    """[lon, lat(, alt)]"""
    return list(position.to_tuple())


def encode_coordinates(value: Any, depth: int) -> list:
    """Inverse of decode_coordinates()."""
    if depth < 1:
        raise ValueError(f"depth must be >= 1, got {depth}")
    if depth == 1:
        if not isinstance(value, Position):
            raise UnsupportedTypeError(type(value), f"Expected a Position, got {type(value).__name__}")
        return encode_position(value)
    return [encode_coordinates(item, depth - 1) for item in value]


class PositionConverter(JsonConverter):
    """
    Converter for Position values and flat Position sequences.

    Attributes:
        altitude: Policy applied to three-token arrays

    Example:
        >>> converter = PositionConverter()
        >>> converter.decode([-122.428938, 37.766713], Position)
        Position(longitude=-122.428938, latitude=37.766713, altitude=None)
    """

    def __init__(self, altitude: AltitudePolicy = AltitudePolicy.PRESERVE, logger=None):
        super().__init__(logger)
        self.altitude = AltitudePolicy(altitude)

    def can_handle(self, target_type: Any) -> bool:
        return target_type is Position or target_type == Positions

    def decode(self, raw: Any, target_type: Any = Position):
        """
        Decode one position, or a flat sequence when target_type is Positions.

        Raises:
            UnsupportedTypeError: target_type is neither Position nor Positions
            ParseError: Malformed array
        """
        self.ensure_handles(target_type)
        if target_type is Position:
            return decode_position(raw, self.altitude)
        return decode_coordinates(raw, 2, self.altitude)

    def encode(self, value: Any) -> list:
        if isinstance(value, Position):
            return encode_position(value)
        if isinstance(value, (list, tuple)):
            return encode_coordinates(value, 2)
        raise UnsupportedTypeError(type(value))

    def decode_coordinates(self, raw: Any, depth: int):
        return decode_coordinates(raw, depth, self.altitude)

    def encode_coordinates(self, value: Any, depth: int) -> list:
        return encode_coordinates(value, depth)
