"""
Configuration schema for the codec.

Altitude handling and CRS interning for the converters, plus output
indentation and log level for the command line.
"""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union
import yaml

from .converters.position import AltitudePolicy

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


@dataclass(frozen=True)
class CodecConfig:
    """
    Codec configuration, immutable after construction.

    Attributes:
        altitude: "preserve" (store and round-trip a third token),
            "drop" (discard it) or "reject" (two tokens only)
        indent: JSON indentation for dumps(); None for compact output
        log_level: Level for the structured loggers
        intern_crs: Share one CRS instance per distinct CRS in a document
    """

    altitude: AltitudePolicy = AltitudePolicy.PRESERVE
    indent: Optional[int] = None
    log_level: str = "INFO"
    intern_crs: bool = True

    def __post_init__(self):
        """Validate configuration."""
        try:
            object.__setattr__(self, 'altitude', AltitudePolicy(self.altitude))
        except ValueError:
            raise ValueError(
                f"Invalid altitude: {self.altitude}. "
                f"Must be one of {sorted(p.value for p in AltitudePolicy)}"
            )

        if self.indent is not None:
            if isinstance(self.indent, bool) or not isinstance(self.indent, int):
                raise ValueError(f"indent must be an integer or null, got {self.indent!r}")
            if self.indent < 0:
                raise ValueError(f"indent must be >= 0, got {self.indent}")

        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(LOG_LEVELS)}"
            )
        object.__setattr__(self, 'log_level', self.log_level.upper())

        if not isinstance(self.intern_crs, bool):
            raise ValueError(f"intern_crs must be true or false, got {self.intern_crs!r}")

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CodecConfig":
        """
        Raises:
            ValueError: Unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(
                f"Unknown configuration keys: {sorted(unknown)}. "
                f"Valid keys: {sorted(known)}"
            )
        return cls(**data)

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "CodecConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            altitude: "preserve"   # preserve | drop | reject
            indent: 2
            log_level: "INFO"
            intern_crs: true
        """
        with open(yaml_path) as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {yaml_path} must contain a mapping")

        return cls.from_dict(data)
