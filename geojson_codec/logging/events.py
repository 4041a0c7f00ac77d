"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Event Naming Convention:
    <subject>.<action>  or  error.<kind>

    subject: geometry, crs, document, config
    action: decoded, encoded, interned, loaded, written

Example Log Query (CloudWatch Insights):
    fields @timestamp, event, message, metadata.kind
    | filter event = "error.parse"
    | stats count() by metadata.kind
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - geometry.*: Geometry decode/encode
    - crs.*: CRS decode and interning
    - document.*, config.*: Outer surfaces (CLI, config files)
    - error.*: Error conditions (logged by outer surfaces only)
    """

    # ========== Codec Events ==========
    GEOMETRY_DECODED = "geometry.decoded"
    """Geometry decoded from a raw value."""

    GEOMETRY_ENCODED = "geometry.encoded"
    """Geometry encoded to a raw value."""

    CRS_DECODED = "crs.decoded"
    """CRS object decoded from a raw value."""

    CRS_INTERNED = "crs.interned"
    """New CRS added to a document table."""

    # ========== Document Events ==========
    DOCUMENT_LOADED = "document.loaded"
    """Document read and decoded."""

    DOCUMENT_WRITTEN = "document.written"
    """Document encoded and written."""

    CONFIG_LOADED = "config.loaded"
    """Codec configuration loaded."""

    # ========== Error Events ==========
    PARSE_ERROR = "error.parse"
    """Raw value could not be parsed."""

    CONSTRUCTION_ERROR = "error.construction"
    """Value violated a geometry or CRS invariant."""

    UNSUPPORTED_TYPE_ERROR = "error.unsupported_type"
    """Converter asked for a type it does not handle."""

    IO_ERROR = "error.io"
    """Failed to read input or configuration."""


CODEC_EVENTS = {
    LogEvent.GEOMETRY_DECODED,
    LogEvent.GEOMETRY_ENCODED,
    LogEvent.CRS_DECODED,
    LogEvent.CRS_INTERNED,
}

DOCUMENT_EVENTS = {
    LogEvent.DOCUMENT_LOADED,
    LogEvent.DOCUMENT_WRITTEN,
    LogEvent.CONFIG_LOADED,
}

ERROR_EVENTS = {
    LogEvent.PARSE_ERROR,
    LogEvent.CONSTRUCTION_ERROR,
    LogEvent.UNSUPPORTED_TYPE_ERROR,
    LogEvent.IO_ERROR,
}
