"""
geojson_codec
=============

Bounded Context: GeoJSON geometry model and codec

Immutable Point / LineString / Polygon values with their structural
invariants, an optional shared CRS annotation, and converters that decode
raw JSON values by their "type" discriminant and encode them back.

Architecture:
- geometry/: Position, geometry variants, LineStringBuilder
- crs: NamedCRS, LinkedCRS, CRSTable
- converters/: Position, CRS and geometry converters plus a registry
- serialization: loads() / dumps() over the stdlib json module
- logging/: Structured JSON logging
- config: CodecConfig (YAML)

Example:
    >>> from geojson_codec import loads, dumps, Polygon
    >>> polygon = loads('{"type": "Polygon", "coordinates": [[[0, 0], [1, 0], [1, 1], [0, 0]]]}')
    >>> isinstance(polygon, Polygon)
    True
    >>> dumps(polygon)
    '{"type": "Polygon", "coordinates": [[[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 0.0]]]}'
"""

__version__ = "1.0.0"

from .errors import (
    GeoJSONError,
    ParseError,
    ConstructionError,
    MissingFieldError,
    OutOfRangeError,
    InvalidRingError,
    UnsupportedTypeError,
)

from .geometry import (
    Position,
    GeometryKind,
    GeoJSONObject,
    Geometry,
    Point,
    LineString,
    Polygon,
    LineStringBuilder,
)

from .crs import (
    CRSType,
    CRS,
    NamedCRS,
    LinkedCRS,
    CRSTable,
    DEFAULT_CRS,
)

from .converters import (
    JsonConverter,
    AltitudePolicy,
    PositionConverter,
    Positions,
    CRSConverter,
    GeometryConverter,
    ConverterRegistry,
    create_registry,
)

from .config import CodecConfig
from .serialization import loads, dumps

from .logging import (
    LogEvent,
    StructuredLogger,
    create_logger,
)

__all__ = [
    '__version__',
    # Errors
    'GeoJSONError',
    'ParseError',
    'ConstructionError',
    'MissingFieldError',
    'OutOfRangeError',
    'InvalidRingError',
    'UnsupportedTypeError',
    # Geometry
    'Position',
    'GeometryKind',
    'GeoJSONObject',
    'Geometry',
    'Point',
    'LineString',
    'Polygon',
    'LineStringBuilder',
    # CRS
    'CRSType',
    'CRS',
    'NamedCRS',
    'LinkedCRS',
    'CRSTable',
    'DEFAULT_CRS',
    # Converters
    'JsonConverter',
    'AltitudePolicy',
    'PositionConverter',
    'Positions',
    'CRSConverter',
    'GeometryConverter',
    'ConverterRegistry',
    'create_registry',
    # Config / text
    'CodecConfig',
    'loads',
    'dumps',
    # Logging
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
