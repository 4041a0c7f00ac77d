"""
Structured Logging for geojson_codec
====================================

JSON-structured logging with typed event names.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory for applications (sets the level)
    get_logger: Factory for library code (leaves the level alone)

The codec itself only emits DEBUG events for successful decode/encode;
errors are raised to the caller and logged, if at all, by the CLI.
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger, get_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
    'get_logger',
]
