"""
Geometry Variants
=================

Point, LineString and Polygon as immutable values.

Design:
- Frozen dataclasses, validated in __post_init__ (fail fast)
- One validated constructor per type; from_coordinates() and from_array()
  feed raw input through the same constructor, never around it
- Ring closure is exact coordinate equality, not geometric proximity
- numpy views for callers that want array math
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from ..crs import CRS
from ..errors import InvalidRingError, MissingFieldError, OutOfRangeError
from .base import Geometry, GeometryKind
from .position import Position


def _as_positions(field: str, values) -> Tuple[Position, ...]:
    if values is None:
        raise MissingFieldError(field)
    if isinstance(values, (str, bytes)):
        raise OutOfRangeError(field, "must be a sequence of Positions")
    try:
        positions = tuple(values)
    except TypeError:
        raise OutOfRangeError(field, f"must be a sequence of Positions, got {type(values).__name__}")
    for index, position in enumerate(positions):
        if not isinstance(position, Position):
            raise OutOfRangeError(
                field,
                f"item {index} must be a Position, got {type(position).__name__}"
            )
    return positions


def _positions_to_array(positions: Sequence[Position]) -> np.ndarray:
    dims = 3 if all(p.has_altitude for p in positions) else 2
    return np.array([p.to_tuple()[:dims] for p in positions], dtype=float)


def _array_to_positions(field: str, vertices) -> Tuple[Position, ...]:
    try:
        vertices = np.asarray(vertices, dtype=float)
    except (TypeError, ValueError) as e:
        raise OutOfRangeError(field, f"not a numeric array: {e}") from e
    if vertices.ndim != 2 or vertices.shape[1] not in (2, 3):
        raise OutOfRangeError(field, f"must be Nx2 or Nx3 array, got shape {vertices.shape}")
    return tuple(Position(*row) for row in vertices.tolist())


def _ring_points_equal(first: Position, last: Position) -> bool:
    return first.to_tuple() == last.to_tuple()


@dataclass(frozen=True)
class Point(Geometry):
    """
    A single position.

    Example:
        >>> Point(Position(-122.428938, 37.766713)).coordinates.longitude
        -122.428938
    """
    coordinates: Position
    crs: Optional[CRS] = None

    kind: ClassVar[GeometryKind] = GeometryKind.POINT

    def __post_init__(self):
        if self.coordinates is None:
            raise MissingFieldError('coordinates')
        if not isinstance(self.coordinates, Position):
            raise OutOfRangeError(
                'coordinates',
                f"must be a Position, got {type(self.coordinates).__name__}"
            )

    @classmethod
    def from_coordinates(cls, raw: Any, crs: Optional[CRS] = None) -> 'Point':
        """Build from a raw [lon, lat(, alt)] array."""
        from ..converters.position import decode_coordinates
        return cls(decode_coordinates(raw, 1), crs)

    def positions(self) -> Iterator[Position]:
        yield self.coordinates

    def to_array(self) -> np.ndarray:
        """Shape (2,) or (3,) array in wire order."""
        return np.array(self.coordinates.to_tuple(), dtype=float)


@dataclass(frozen=True)
class LineString(Geometry):
    """
    Ordered sequence of two or more positions.

    Invariants:
        - at least 2 positions

    A closed LineString with four or more positions is a linear ring, the
    building block of Polygon.
    """
    coordinates: Tuple[Position, ...]
    crs: Optional[CRS] = None

    kind: ClassVar[GeometryKind] = GeometryKind.LINE_STRING

    def __post_init__(self):
        positions = _as_positions('coordinates', self.coordinates)
        if len(positions) < 2:
            raise OutOfRangeError(
                'coordinates',
                f"a LineString needs at least two positions, got {len(positions)}"
            )
        object.__setattr__(self, 'coordinates', positions)

    @classmethod
    def from_coordinates(cls, raw: Any, crs: Optional[CRS] = None) -> 'LineString':
        """Build from a raw [[lon, lat], ...] array."""
        from ..converters.position import decode_coordinates
        return cls(decode_coordinates(raw, 2), crs)

    @classmethod
    def from_array(cls, vertices, crs: Optional[CRS] = None) -> 'LineString':
        """
        Build from an Nx2 or Nx3 array-like.

        Raises:
            OutOfRangeError: If the array is not numeric or has the wrong shape
        """
        return cls(_array_to_positions('coordinates', vertices), crs)

    def __len__(self) -> int:
        return len(self.coordinates)

    def positions(self) -> Iterator[Position]:
        return iter(self.coordinates)

    def is_closed(self) -> bool:
        """First and last positions are identical (altitude included)."""
        return _ring_points_equal(self.coordinates[0], self.coordinates[-1])

    def is_linear_ring(self) -> bool:
        """Closed and at least four positions long."""
        return len(self.coordinates) >= 4 and self.is_closed()

    def to_array(self) -> np.ndarray:
        """Shape (N, 2), or (N, 3) when every position has an altitude."""
        return _positions_to_array(self.coordinates)


def _as_linear_ring(index: int, ring) -> LineString:
    if ring is None:
        raise MissingFieldError(f"rings[{index}]")
    if isinstance(ring, LineString):
        positions = ring.coordinates
    else:
        positions = _as_positions(f"rings[{index}]", ring)

    if len(positions) < 4:
        raise InvalidRingError(
            index, InvalidRingError.TOO_SHORT,
            f"a linear ring needs at least four positions, got {len(positions)}"
        )
    if not _ring_points_equal(positions[0], positions[-1]):
        raise InvalidRingError(
            index, InvalidRingError.NOT_CLOSED,
            "a linear ring must end on its first position"
        )

    if isinstance(ring, LineString) and ring.crs is None:
        return ring
    return LineString(positions)


@dataclass(frozen=True)
class Polygon(Geometry):
    """
    One exterior linear ring followed by zero or more holes.

    Rings may be given as LineStrings or as sequences of Positions; every
    ring is checked in order and the first violation aborts construction
    with an InvalidRingError naming the ring index and the rule broken.

    Example:
        >>> ring = [Position(0, 0), Position(1, 0), Position(1, 1), Position(0, 0)]
        >>> Polygon([ring]).exterior.is_linear_ring()
        True
    """
    rings: Tuple[LineString, ...]
    crs: Optional[CRS] = None

    kind: ClassVar[GeometryKind] = GeometryKind.POLYGON

    def __post_init__(self):
        if self.rings is None:
            raise MissingFieldError('rings')
        if isinstance(self.rings, (str, bytes, LineString)):
            raise OutOfRangeError('rings', "must be a sequence of rings")
        try:
            rings = tuple(self.rings)
        except TypeError:
            raise OutOfRangeError('rings', f"must be a sequence of rings, got {type(self.rings).__name__}")
        if not rings:
            raise OutOfRangeError('rings', "a Polygon needs at least one linear ring")
        object.__setattr__(
            self, 'rings',
            tuple(_as_linear_ring(index, ring) for index, ring in enumerate(rings))
        )

    @classmethod
    def from_coordinates(cls, raw: Any, crs: Optional[CRS] = None) -> 'Polygon':
        """Build from a raw [[[lon, lat], ...], ...] array, rings validated."""
        from ..converters.position import decode_coordinates
        return cls(decode_coordinates(raw, 3), crs)

    @classmethod
    def from_arrays(cls, arrays: Sequence[Any], crs: Optional[CRS] = None) -> 'Polygon':
        """Build from one Nx2 / Nx3 array-like per ring."""
        return cls(
            tuple(
                _array_to_positions(f"rings[{index}]", vertices)
                for index, vertices in enumerate(arrays)
            ),
            crs
        )

    @property
    def coordinates(self) -> Tuple[Tuple[Position, ...], ...]:
        return tuple(ring.coordinates for ring in self.rings)

    @property
    def exterior(self) -> LineString:
        return self.rings[0]

    @property
    def holes(self) -> Tuple[LineString, ...]:
        return self.rings[1:]

    def positions(self) -> Iterator[Position]:
        for ring in self.rings:
            yield from ring.coordinates

    def to_arrays(self) -> List[np.ndarray]:
        return [ring.to_array() for ring in self.rings]
