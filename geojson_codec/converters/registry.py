"""
ConverterRegistry - Explicit converter registration

Bounded Context: Routing target types to converters
Responsibilities:
  - Register converters by name
  - Find the converter that handles a target type (first match wins)
  - Reject unknown target types before any parsing
  - Provide introspection (available_converters, get_help)

Threading: registration takes a lock; lookups are read-only
"""

import threading
from typing import Any, Dict, Optional, Set

from ..crs import CRSTable
from ..errors import UnsupportedTypeError
from ..logging import StructuredLogger
from .base import JsonConverter
from .crs import CRSConverter
from .geometry import GeometryConverter
from .position import AltitudePolicy, PositionConverter


class ConverterRegistry:
    """
    Registry of converters with explicit registration.

    Example:
        registry = ConverterRegistry()
        registry.register('geometry', GeometryConverter(), "Point, LineString, Polygon")

        try:
            registry.decode(raw, Geometry)
        except UnsupportedTypeError as e:
            print(f"No converter: {e}")
    """

    def __init__(self):
        self._converters: Dict[str, JsonConverter] = {}
        self._descriptions: Dict[str, str] = {}
        self._lock = threading.Lock()

    def register(self, name: str, converter: JsonConverter, description: str) -> None:
        """
        Register a converter.

        Raises:
            ValueError: If name already registered
        """
        with self._lock:
            if name in self._converters:
                raise ValueError(f"Converter '{name}' already registered")

            self._converters[name] = converter
            self._descriptions[name] = description

    def find(self, target_type: Any) -> JsonConverter:
        """
        First registered converter whose can_handle() accepts target_type.

        Raises:
            UnsupportedTypeError: If none does
        """
        for converter in self._converters.values():
            if converter.can_handle(target_type):
                return converter
        name = getattr(target_type, '__name__', repr(target_type))
        raise UnsupportedTypeError(
            target_type,
            f"No converter for type {name}. "
            f"Available converters: {', '.join(self._converters) or 'none'}"
        )

    def get(self, name: str) -> JsonConverter:
        return self._converters[name]

    def decode(self, raw: Any, target_type: Any) -> Any:
        return self.find(target_type).decode(raw, target_type)

    def encode(self, value: Any) -> Any:
        return self.find(type(value)).encode(value)

    def is_available(self, name: str) -> bool:
        return name in self._converters

    @property
    def available_converters(self) -> Set[str]:
        return set(self._converters.keys())

    def get_help(self) -> Dict[str, str]:
        return dict(self._descriptions)

    def count(self) -> int:
        return len(self._converters)


def create_registry(
    config=None,
    crs_table: Optional[CRSTable] = None,
    logger: Optional[StructuredLogger] = None
) -> ConverterRegistry:
    """
    Default registry: position, CRS and geometry converters.

    Args:
        config: CodecConfig (altitude policy, CRS interning); defaults apply when None
        crs_table: Table to intern decoded CRS values into; a fresh one is
            created when the config asks for interning and none is given
        logger: Structured logger shared by the converters
    """
    altitude = config.altitude if config is not None else AltitudePolicy.PRESERVE
    intern_crs = config.intern_crs if config is not None else True
    if crs_table is None and intern_crs:
        crs_table = CRSTable()

    positions = PositionConverter(altitude=altitude, logger=logger)
    crs_converter = CRSConverter(table=crs_table, logger=logger)
    geometry = GeometryConverter(positions=positions, crs_converter=crs_converter, logger=logger)

    registry = ConverterRegistry()
    registry.register('position', positions, "[lon, lat(, alt)] arrays <-> Position")
    registry.register('crs', crs_converter, "Named and linked CRS objects")
    registry.register('geometry', geometry, "Point, LineString and Polygon objects")
    return registry
