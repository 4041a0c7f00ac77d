"""
Error Taxonomy
==============

Bounded Context: Failure reporting for construction and decoding

Every failure surfaces synchronously to the caller of the constructor or
decode call that hit it. Nothing here is logged or retried.

Hierarchy:
    GeoJSONError
    ├── ParseError            malformed raw value (shape, arity, token, discriminant)
    ├── ConstructionError     rule violation while building a domain value
    │   ├── MissingFieldError     required field is None
    │   └── OutOfRangeError       field present but not allowed (empty, too short, ...)
    └── UnsupportedTypeError  converter asked for a type it does not handle

ParseError and ConstructionError are also ValueErrors, UnsupportedTypeError
is a TypeError, so callers catching the builtin families keep working.
"""

from typing import Any, Optional


class GeoJSONError(Exception):
    """Base class for every error raised by geojson_codec."""


class ParseError(GeoJSONError, ValueError):
    """
    Raised when a raw value cannot be read as the requested shape.

    Attributes:
        value: The offending raw value (or discriminant), when known
    """

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class ConstructionError(GeoJSONError, ValueError):
    """
    Raised when a domain value would violate one of its invariants.

    Attributes:
        field: Name of the field that failed validation
    """

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field


class MissingFieldError(ConstructionError):
    """A required field was None."""

    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__(field, message or "required field is missing")


class OutOfRangeError(ConstructionError):
    """A field was present but its value is not allowed."""


class InvalidRingError(OutOfRangeError):
    """
    A Polygon ring is not a linear ring.

    Attributes:
        ring_index: Index of the offending ring (0 = exterior)
        rule: TOO_SHORT or NOT_CLOSED
    """
    TOO_SHORT = "too_short"
    NOT_CLOSED = "not_closed"

    def __init__(self, ring_index: int, rule: str, message: str):
        super().__init__(f"rings[{ring_index}]", message)
        self.ring_index = ring_index
        self.rule = rule


class UnsupportedTypeError(GeoJSONError, TypeError):
    """
    Raised by a converter (or the registry) before any parsing starts when
    the requested target type is not one it handles.

    Attributes:
        target_type: The rejected type
    """

    def __init__(self, target_type: Any, message: Optional[str] = None):
        name = getattr(target_type, "__name__", repr(target_type))
        super().__init__(message or f"Cannot convert to type {name}")
        self.target_type = target_type
