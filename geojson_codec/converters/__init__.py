"""
Converters
==========

Bounded Context: Raw value <-> domain value conversion

Public API
----------
    JsonConverter: Abstract converter contract (can_handle / decode / encode)
    PositionConverter, AltitudePolicy, Positions: Coordinate tuples
    CRSConverter: `crs` member
    GeometryConverter: Discriminant dispatch for Point, LineString, Polygon
    ConverterRegistry, create_registry: Target type routing
"""

from .base import JsonConverter
from .position import (
    AltitudePolicy,
    PositionConverter,
    Positions,
    decode_coordinates,
    decode_position,
    encode_coordinates,
    encode_position,
)
from .crs import CRSConverter
from .geometry import GeometryConverter
from .registry import ConverterRegistry, create_registry

__all__ = [
    'JsonConverter',
    'AltitudePolicy',
    'PositionConverter',
    'Positions',
    'decode_coordinates',
    'decode_position',
    'encode_coordinates',
    'encode_position',
    'CRSConverter',
    'GeometryConverter',
    'ConverterRegistry',
    'create_registry',
]
