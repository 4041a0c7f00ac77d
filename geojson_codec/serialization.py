"""
Text helpers over the stdlib json module.

The converters work on already-parsed values; these helpers are the thin
host that turns text into those values and back.
"""

import json
from typing import Any, Optional

from .config import CodecConfig
from .converters import ConverterRegistry, create_registry
from .errors import ParseError
from .geometry import Geometry


def loads(
    text: str,
    target_type: Any = Geometry,
    config: Optional[CodecConfig] = None,
    registry: Optional[ConverterRegistry] = None
) -> Any:
    """
    Parse JSON text and decode it as `target_type`.

    Raises:
        ParseError: Invalid JSON, or anything the converter rejects
        ConstructionError: Value breaks a geometry or CRS invariant
        UnsupportedTypeError: No converter for target_type
    """
    registry = registry or create_registry(config)
    converter = registry.find(target_type)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON: {e}", text) from e
    return converter.decode(data, target_type)


def dumps(
    value: Any,
    config: Optional[CodecConfig] = None,
    registry: Optional[ConverterRegistry] = None
) -> str:
    """Encode `value` and render it as JSON text (NaN never written)."""
    config = config or CodecConfig()
    registry = registry or create_registry(config)
    return json.dumps(registry.encode(value), indent=config.indent, allow_nan=False)
