"""
Geometry Base Types
===================

GeometryKind is the discriminant; GeoJSONObject carries it together with the
optional CRS reference; Geometry is the capability every variant implements
and the target type converters accept.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar, Iterator, Optional

from ..crs import CRS
from .position import Position


class GeometryKind(str, Enum):
    """
    Geometry discriminant values.

    Only Point, LineString and Polygon are implemented; the multi-part kinds
    and GeometryCollection are reserved so the discriminant space matches the
    format.
    """
    POINT = "Point"
    LINE_STRING = "LineString"
    POLYGON = "Polygon"
    MULTI_POINT = "MultiPoint"
    MULTI_LINE_STRING = "MultiLineString"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"

    @property
    def is_implemented(self) -> bool:
        return self in IMPLEMENTED_KINDS

    @property
    def coordinate_depth(self) -> int:
        """
        Nesting depth of the coordinates member.

        Raises:
            ValueError: For reserved kinds
        """
        try:
            return _DEPTHS[self]
        except KeyError:
            raise ValueError(f"{self.value} is not an implemented geometry kind")


IMPLEMENTED_KINDS = frozenset({
    GeometryKind.POINT,
    GeometryKind.LINE_STRING,
    GeometryKind.POLYGON,
})

_DEPTHS = {
    GeometryKind.POINT: 1,
    GeometryKind.LINE_STRING: 2,
    GeometryKind.POLYGON: 3,
}


class GeoJSONObject(ABC):
    """
    Base for GeoJSON objects: a class-level discriminant plus an optional
    CRS reference (`crs` attribute, provided by each concrete dataclass).

    The CRS is shared, never copied: several objects may point at the same
    instance (see CRSTable).
    """

    kind: ClassVar[GeometryKind]
    crs: Optional[CRS]

    @property
    def type(self) -> GeometryKind:
        return self.kind


class Geometry(GeoJSONObject):
    """Capability implemented by Point, LineString and Polygon."""

    @abstractmethod
    def positions(self) -> Iterator[Position]:
        """Every Position of the geometry, in wire order."""

    @property
    def coordinate_depth(self) -> int:
        return self.kind.coordinate_depth

    @property
    def has_altitude(self) -> bool:
        """True when every position carries an altitude."""
        return all(p.has_altitude for p in self.positions())
