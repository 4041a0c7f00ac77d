"""
Base Converter
==============

Bounded Context: Host serialization boundary

A host engine tokenizes text into plain values (dicts, lists, numbers,
strings) and asks a converter to turn them into domain values, or back.

Architecture:
    JsonConverter (abstract)
        ↓
    PositionConverter, CRSConverter, GeometryConverter (concrete)

Contract:
- can_handle(target_type): pure type check, no parsing
- decode(raw, target_type): raises UnsupportedTypeError before parsing when
  can_handle() is false, ParseError / ConstructionError otherwise
- encode(value): plain JSON-compatible value
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..errors import UnsupportedTypeError
from ..logging import StructuredLogger, get_logger


class JsonConverter(ABC):
    """
    Abstract base class for converters.

    Attributes:
        logger: Structured logger (DEBUG events on success only)
    """

    def __init__(self, logger: Optional[StructuredLogger] = None):
        self.logger = logger or get_logger("codec")

    @abstractmethod
    def can_handle(self, target_type: Any) -> bool:
        """True if decode() accepts `target_type`."""

    @abstractmethod
    def decode(self, raw: Any, target_type: Any) -> Any:
        """Turn a raw value into a domain value of `target_type`."""

    @abstractmethod
    def encode(self, value: Any) -> Any:
        """Turn a domain value into a raw JSON-compatible value."""

    def ensure_handles(self, target_type: Any) -> None:
        """
        Raises:
            UnsupportedTypeError: If can_handle(target_type) is false
        """
        if not self.can_handle(target_type):
            raise UnsupportedTypeError(
                target_type,
                f"{type(self).__name__} cannot convert to "
                f"{getattr(target_type, '__name__', repr(target_type))}"
            )
