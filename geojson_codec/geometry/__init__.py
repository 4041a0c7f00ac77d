"""
Geometry Layer
==============

Bounded Context: Immutable geometry values and their structural invariants.

Responsibilities:
- Position tuples (lon, lat, optional altitude)
- Point / LineString / Polygon with validation at construction
- Linear ring predicates (exact-equality closure)
- Incremental LineString building with explicit finalize
- NO parsing of text, NO geometry algorithms
"""

from .position import Position
from .base import GeometryKind, GeoJSONObject, Geometry, IMPLEMENTED_KINDS
from .shapes import Point, LineString, Polygon
from .builder import LineStringBuilder

__all__ = [
    "Position",
    "GeometryKind",
    "GeoJSONObject",
    "Geometry",
    "IMPLEMENTED_KINDS",
    "Point",
    "LineString",
    "Polygon",
    "LineStringBuilder",
]
