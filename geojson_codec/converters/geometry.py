"""
Geometry Dispatch Codec
=======================

Reads the `type` discriminant of a geometry object and routes it through a
fixed dispatch table to the matching variant; writes a variant back with
its discriminant.

Decode flow:
    target type check -> object check -> discriminant lookup
        -> coordinates at the variant's depth -> optional crs -> constructor

Every failure is raised to the caller; there is no placeholder result for
unknown or half-matched input.
"""

from collections.abc import Mapping
from typing import Any, Dict, Optional, Type

from ..errors import ParseError, UnsupportedTypeError
from ..geometry import Geometry, GeometryKind, LineString, Point, Polygon
from ..logging import LogEvent, StructuredLogger
from .base import JsonConverter
from .crs import CRSConverter
from .position import PositionConverter

_DISPATCH: Dict[str, Type[Geometry]] = {
    GeometryKind.POINT.value: Point,
    GeometryKind.LINE_STRING.value: LineString,
    GeometryKind.POLYGON.value: Polygon,
}

_RESERVED = frozenset(
    kind.value for kind in GeometryKind if not kind.is_implemented
)


class GeometryConverter(JsonConverter):
    """
    Converter for Point, LineString and Polygon.

    Attributes:
        positions: Coordinate codec (carries the altitude policy)
        crs_converter: Codec for the optional `crs` member

    Example:
        >>> converter = GeometryConverter()
        >>> point = converter.decode({"type": "Point", "coordinates": [-122.428938, 37.766713]})
        >>> converter.encode(point)
        {'type': 'Point', 'coordinates': [-122.428938, 37.766713]}
    """

    def __init__(
        self,
        positions: Optional[PositionConverter] = None,
        crs_converter: Optional[CRSConverter] = None,
        logger: Optional[StructuredLogger] = None
    ):
        super().__init__(logger)
        self.positions = positions or PositionConverter(logger=self.logger)
        self.crs_converter = crs_converter or CRSConverter(logger=self.logger)

    def can_handle(self, target_type: Any) -> bool:
        return isinstance(target_type, type) and issubclass(target_type, Geometry)

    def decode(self, raw: Any, target_type: Any = Geometry) -> Geometry:
        """
        Decode a geometry object.

        Args:
            raw: Mapping with "type", "coordinates" and optional "crs"
            target_type: Geometry, or a concrete variant the value must match

        Raises:
            UnsupportedTypeError: target_type is not a geometry type
            ParseError: Malformed object, unknown or mismatched discriminant,
                malformed coordinates
            ConstructionError: Coordinates break the variant's invariants
        """
        self.ensure_handles(target_type)

        if not isinstance(raw, Mapping):
            raise ParseError(f"Geometry could not be parsed. Expected an object, received: {raw!r}", raw)

        if 'type' not in raw:
            raise ParseError("Geometry could not be parsed. Missing 'type' member", raw)
        discriminant = raw['type']
        if not isinstance(discriminant, str):
            raise ParseError(f"Geometry type must be a string, received: {discriminant!r}", discriminant)

        variant = _DISPATCH.get(discriminant)
        if variant is None:
            if discriminant in _RESERVED:
                raise ParseError(f"Geometry type {discriminant!r} is not supported", discriminant)
            raise ParseError(f"Unknown geometry type: {discriminant!r}", discriminant)

        if not issubclass(variant, target_type):
            raise ParseError(
                f"Expected a {target_type.__name__} geometry, received type {discriminant!r}",
                discriminant
            )

        if 'coordinates' not in raw:
            raise ParseError(f"{discriminant} could not be parsed. Missing 'coordinates' member", raw)
        coordinates = self.positions.decode_coordinates(
            raw['coordinates'], variant.kind.coordinate_depth
        )

        crs = None
        if raw.get('crs') is not None:
            crs = self.crs_converter.decode(raw['crs'])

        geometry = variant(coordinates, crs)
        self.logger.debug(
            event=LogEvent.GEOMETRY_DECODED,
            message=f"Decoded {discriminant}",
            metadata={'kind': discriminant, 'positions': sum(1 for _ in geometry.positions())}
        )
        return geometry

    def encode(self, value: Any) -> Dict[str, Any]:
        """
        Raises:
            UnsupportedTypeError: value is not a Geometry
        """
        if not isinstance(value, Geometry):
            raise UnsupportedTypeError(type(value))

        result = {
            'type': value.kind.value,
            'coordinates': self.positions.encode_coordinates(
                value.coordinates, value.coordinate_depth
            ),
        }
        if value.crs is not None:
            result['crs'] = self.crs_converter.encode(value.crs)

        self.logger.debug(
            event=LogEvent.GEOMETRY_ENCODED,
            message=f"Encoded {value.kind.value}",
            metadata={'kind': value.kind.value}
        )
        return result
