"""
Coordinate Reference System Model
=================================

Bounded Context: CRS annotation attached to geometry objects

Design:
- Closed set of variants: NamedCRS ("name") and LinkedCRS ("link")
- Frozen, hashable values so one instance can be shared by every geometry
  of a document
- CRSTable interns equal CRS values into a single shared instance; geometries
  hold a reference, never a private copy

Wire form:
    {"type": "name", "properties": {"name": "urn:ogc:def:crs:EPSG::4326"}}
    {"type": "link", "properties": {"href": "http://example.com/crs/42", "type": "proj4"}}
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, Union
from urllib.parse import ParseResult, SplitResult

from .errors import MissingFieldError, OutOfRangeError


class CRSType(str, Enum):
    """CRS discriminant values."""
    NAME = "name"
    LINK = "link"


def _require_text(field: str, value) -> str:
    if value is None:
        raise MissingFieldError(field)
    if not isinstance(value, str):
        raise OutOfRangeError(field, f"must be a string, got {type(value).__name__}")
    if not value:
        raise OutOfRangeError(field, "may not be empty")
    return value


class CRS(ABC):
    """
    Capability shared by every CRS variant.

    Subclasses expose a `type` discriminant and a `properties` mapping.
    """

    type: CRSType

    @property
    @abstractmethod
    def properties(self) -> Dict[str, Any]:
        """Property mapping as written on the wire (fresh dict)."""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {'type': self.type.value, 'properties': self.properties}


@dataclass(frozen=True)
class NamedCRS(CRS):
    """
    CRS identified by name, typically an OGC URN.

    Example:
        >>> NamedCRS("urn:ogc:def:crs:EPSG::4326").properties
        {'name': 'urn:ogc:def:crs:EPSG::4326'}
    """
    name: str

    type = CRSType.NAME

    def __post_init__(self):
        _require_text('name', self.name)

    @property
    def properties(self) -> Dict[str, Any]:
        return {'name': self.name}


@dataclass(frozen=True)
class LinkedCRS(CRS):
    """
    CRS referenced by a dereferenceable URI.

    Attributes:
        href: Mandatory URI of the CRS definition
        link_type: Optional format hint ("proj4", "ogcwkt", "esriwkt"),
            written as the "type" property only when non-empty

    Invariants:
        - href is None -> MissingFieldError
        - href is empty -> OutOfRangeError

    Example:
        >>> LinkedCRS("http://example.com/crs/42", "proj4").properties
        {'href': 'http://example.com/crs/42', 'type': 'proj4'}
    """
    href: str
    link_type: str = ""

    type = CRSType.LINK

    def __post_init__(self):
        _require_text('href', self.href)
        if self.link_type is None:
            object.__setattr__(self, 'link_type', "")
        elif not isinstance(self.link_type, str):
            raise OutOfRangeError('type', f"must be a string, got {type(self.link_type).__name__}")

    @classmethod
    def from_uri(cls, uri: Union[ParseResult, SplitResult], link_type: str = "") -> 'LinkedCRS':
        """Build from a parsed URL; same validation as the string form."""
        if uri is None:
            raise MissingFieldError('href')
        return cls(uri.geturl(), link_type)

    @property
    def properties(self) -> Dict[str, Any]:
        result = {'href': self.href}
        if self.link_type:
            result['type'] = self.link_type
        return result


DEFAULT_CRS = NamedCRS("urn:ogc:def:crs:OGC:1.3:CRS84")


class CRSTable:
    """
    Document-level table of shared CRS instances.

    intern() hands back the first instance registered that is equal to the
    argument, so geometries decoded from one document all reference the same
    object. Append-only; not synchronised.

    Example:
        >>> table = CRSTable()
        >>> a = table.intern(NamedCRS("EPSG:4326"))
        >>> b = table.intern(NamedCRS("EPSG:4326"))
        >>> a is b
        True
    """

    def __init__(self):
        self._entries: List[CRS] = []
        self._index: Dict[CRS, int] = {}

    def intern(self, crs: CRS) -> CRS:
        if crs in self._index:
            return self._entries[self._index[crs]]
        self._index[crs] = len(self._entries)
        self._entries.append(crs)
        return crs

    def index_of(self, crs: CRS) -> int:
        """
        Position of `crs` in the table.

        Raises:
            KeyError: If no equal CRS was interned
        """
        return self._index[crs]

    def __contains__(self, crs: object) -> bool:
        return crs in self._index

    def __getitem__(self, index: int) -> CRS:
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CRS]:
        return iter(self._entries)
