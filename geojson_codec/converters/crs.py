"""
CRS Codec
=========

Reads and writes the `crs` member:

    {"type": "name", "properties": {"name": ...}}
    {"type": "link", "properties": {"href": ..., "type"?: ...}}

Dispatch goes through a fixed table keyed by the discriminant. Decoded
values can be interned into a CRSTable so every geometry of a document
shares one instance per distinct CRS.
"""

from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional, Tuple, Type

from ..crs import CRS, CRSTable, CRSType, LinkedCRS, NamedCRS
from ..errors import ParseError, UnsupportedTypeError
from ..logging import LogEvent, StructuredLogger
from .base import JsonConverter


def _named(properties: Mapping) -> NamedCRS:
    return NamedCRS(properties.get('name'))


def _linked(properties: Mapping) -> LinkedCRS:
    return LinkedCRS(properties.get('href'), properties.get('type') or "")


_DISPATCH: Dict[str, Tuple[Type[CRS], Callable[[Mapping], CRS]]] = {
    CRSType.NAME.value: (NamedCRS, _named),
    CRSType.LINK.value: (LinkedCRS, _linked),
}


class CRSConverter(JsonConverter):
    """
    Converter for CRS values.

    Attributes:
        table: Optional document table decoded values are interned into
    """

    def __init__(self, table: Optional[CRSTable] = None, logger: Optional[StructuredLogger] = None):
        super().__init__(logger)
        self.table = table

    def can_handle(self, target_type: Any) -> bool:
        return isinstance(target_type, type) and issubclass(target_type, CRS)

    def decode(self, raw: Any, target_type: Any = CRS) -> CRS:
        """
        Raises:
            UnsupportedTypeError: target_type is not a CRS type
            ParseError: Not an object, unknown discriminant, bad properties
            ConstructionError: Missing or empty name / href
        """
        self.ensure_handles(target_type)

        if not isinstance(raw, Mapping):
            raise ParseError(f"CRS could not be parsed. Expected an object, received: {raw!r}", raw)

        discriminant = raw.get('type')
        if not isinstance(discriminant, str) or discriminant not in _DISPATCH:
            raise ParseError(f"Unknown CRS type: {discriminant!r}", discriminant)
        variant, build = _DISPATCH[discriminant]

        if not issubclass(variant, target_type):
            raise ParseError(
                f"Expected a {target_type.__name__}, received CRS type {discriminant!r}",
                discriminant
            )

        properties = raw.get('properties')
        if not isinstance(properties, Mapping):
            raise ParseError(
                f"CRS could not be parsed. 'properties' must be an object, received: {properties!r}",
                properties
            )

        crs = build(properties)
        self.logger.debug(
            event=LogEvent.CRS_DECODED,
            message=f"Decoded {discriminant} CRS",
            metadata={'properties': crs.properties}
        )
        return self.intern(crs)

    def encode(self, value: Any) -> Dict[str, Any]:
        if not isinstance(value, CRS):
            raise UnsupportedTypeError(type(value))
        return value.to_dict()

    def intern(self, crs: CRS) -> CRS:
        """Shared instance from the table (or `crs` itself without one)."""
        if self.table is None:
            return crs
        if crs not in self.table:
            self.logger.debug(
                event=LogEvent.CRS_INTERNED,
                message="New CRS in document table",
                metadata={'index': len(self.table), 'properties': crs.properties}
            )
        return self.table.intern(crs)
