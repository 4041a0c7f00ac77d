"""
Incremental LineString Builder
==============================

Accumulates positions one at a time and only produces a LineString from
build(), which runs the normal validated constructor. The builder is not a
geometry and has no discriminant, so a half-built line can never pass for
a valid LineString.

Not thread-safe: callers sharing a builder must serialise access.
"""

from typing import Iterable, List, Optional, Tuple

from ..crs import CRS
from ..errors import InvalidRingError, OutOfRangeError
from .position import Position
from .shapes import LineString


class LineStringBuilder:
    """
    Mutable accumulator for LineString positions.

    Example:
        >>> builder = LineStringBuilder()
        >>> _ = builder.add_coordinates(0, 0).add_coordinates(1, 0).add_coordinates(1, 1)
        >>> ring = builder.close().build_ring()
        >>> ring.is_linear_ring()
        True
    """

    def __init__(self, crs: Optional[CRS] = None):
        self.crs = crs
        self._positions: List[Position] = []

    def add(self, position: Position) -> 'LineStringBuilder':
        if not isinstance(position, Position):
            raise OutOfRangeError(
                'position',
                f"must be a Position, got {type(position).__name__}"
            )
        self._positions.append(position)
        return self

    def add_coordinates(
        self,
        longitude: float,
        latitude: float,
        altitude: Optional[float] = None
    ) -> 'LineStringBuilder':
        return self.add(Position(longitude, latitude, altitude))

    def extend(self, positions: Iterable[Position]) -> 'LineStringBuilder':
        for position in positions:
            self.add(position)
        return self

    def close(self) -> 'LineStringBuilder':
        """Repeat the first position at the end unless already closed."""
        if not self._positions:
            raise OutOfRangeError('coordinates', "cannot close an empty builder")
        if self._positions[0] != self._positions[-1] or len(self._positions) == 1:
            self._positions.append(self._positions[0])
        return self

    def clear(self) -> None:
        self._positions.clear()

    @property
    def positions(self) -> Tuple[Position, ...]:
        """Snapshot of the positions added so far."""
        return tuple(self._positions)

    def __len__(self) -> int:
        return len(self._positions)

    def build(self) -> LineString:
        """
        Validate and freeze.

        Raises:
            OutOfRangeError: Fewer than two positions
        """
        return LineString(tuple(self._positions), self.crs)

    def build_ring(self) -> LineString:
        """
        Validate as a linear ring (closed, four or more positions).

        Raises:
            InvalidRingError: Too short or not closed
        """
        line = self.build()
        if len(line) < 4:
            raise InvalidRingError(
                0, InvalidRingError.TOO_SHORT,
                f"a linear ring needs at least four positions, got {len(line)}"
            )
        if not line.is_closed():
            raise InvalidRingError(
                0, InvalidRingError.NOT_CLOSED,
                "a linear ring must end on its first position"
            )
        return line
