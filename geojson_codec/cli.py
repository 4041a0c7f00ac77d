"""
geojson-codec CLI - Main entry point.

Checks GeoJSON geometry documents and re-encodes them.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional
import yaml

from .config import CodecConfig
from .converters import create_registry
from .errors import ConstructionError, ParseError, UnsupportedTypeError
from .geometry import Geometry, LineString, Polygon
from .logging import LogEvent, StructuredLogger, create_logger
from .serialization import dumps, loads

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def read_text(path: str) -> str:
    """Read FILE, or stdin when path is '-'."""
    if path == '-':
        return sys.stdin.read()
    return Path(path).read_text(encoding='utf-8')


def summarize(geometry: Geometry) -> Dict[str, Any]:
    """JSON-ready summary of a decoded geometry."""
    summary: Dict[str, Any] = {
        'type': geometry.kind.value,
        'positions': sum(1 for _ in geometry.positions()),
        'has_altitude': geometry.has_altitude,
    }
    if isinstance(geometry, Polygon):
        summary['rings'] = len(geometry.rings)
        summary['holes'] = len(geometry.holes)
    elif isinstance(geometry, LineString):
        summary['closed'] = geometry.is_closed()
        summary['linear_ring'] = geometry.is_linear_ring()
    if geometry.crs is not None:
        summary['crs'] = geometry.crs.to_dict()
    return summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geojson-codec",
        description="Validate and normalise GeoJSON geometries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check a geometry file (exit code 1 if invalid)
  geojson-codec validate parcel.json

  # Re-encode with 2-space indentation from a config file
  geojson-codec --config codec.yaml normalize parcel.json

  # Summary from stdin
  cat parcel.json | geojson-codec info -
"""
    )

    parser.add_argument(
        "--config",
        help="Path to codec config YAML"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level"
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    validate = subparsers.add_parser('validate', help='Decode FILE and report whether it is valid')
    validate.add_argument('file', help="Geometry JSON file ('-' for stdin)")

    normalize = subparsers.add_parser('normalize', help='Decode FILE and print it re-encoded')
    normalize.add_argument('file', help="Geometry JSON file ('-' for stdin)")

    info = subparsers.add_parser('info', help='Print a JSON summary of FILE')
    info.add_argument('file', help="Geometry JSON file ('-' for stdin)")

    return parser


def _load_config(args: argparse.Namespace) -> CodecConfig:
    config = CodecConfig.from_yaml(args.config) if args.config else CodecConfig()
    if args.log_level:
        config = CodecConfig(
            altitude=config.altitude,
            indent=config.indent,
            log_level=args.log_level,
            intern_crs=config.intern_crs,
        )
    return config


def _run(args: argparse.Namespace, config: CodecConfig, logger: StructuredLogger) -> int:
    registry = create_registry(config, logger=create_logger("codec", level=config.logging_level))

    try:
        text = read_text(args.file)
    except OSError as e:
        logger.error(
            event=LogEvent.IO_ERROR,
            message="Cannot read input",
            exc_info=e,
            metadata={'path': args.file}
        )
        return EXIT_USAGE
    except UnicodeDecodeError as e:
        logger.error(
            event=LogEvent.PARSE_ERROR,
            message="Input is not UTF-8 text",
            exc_info=e,
            metadata={'path': args.file, 'offset': e.start}
        )
        return EXIT_INVALID

    try:
        geometry = loads(text, Geometry, registry=registry)
    except ParseError as e:
        logger.error(event=LogEvent.PARSE_ERROR, message="Invalid geometry",
                     exc_info=e, metadata={'path': args.file})
        return EXIT_INVALID
    except ConstructionError as e:
        logger.error(event=LogEvent.CONSTRUCTION_ERROR, message="Invalid geometry",
                     exc_info=e, metadata={'path': args.file, 'field': e.field})
        return EXIT_INVALID
    except UnsupportedTypeError as e:
        logger.error(event=LogEvent.UNSUPPORTED_TYPE_ERROR, message="Unsupported type",
                     exc_info=e, metadata={'path': args.file})
        return EXIT_INVALID

    logger.info(
        event=LogEvent.DOCUMENT_LOADED,
        message=f"Loaded {geometry.kind.value}",
        metadata={'path': args.file}
    )

    if args.command == 'validate':
        print(f"{args.file}: valid {geometry.kind.value}")
    elif args.command == 'normalize':
        print(dumps(geometry, config, registry=registry))
        logger.info(
            event=LogEvent.DOCUMENT_WRITTEN,
            message=f"Wrote {geometry.kind.value}",
            metadata={'path': args.file}
        )
    elif args.command == 'info':
        print(json.dumps(summarize(geometry), indent=2))

    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_USAGE

    try:
        config = _load_config(args)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger = create_logger("cli", level=logging.INFO)
        logger.error(
            event=LogEvent.IO_ERROR,
            message="Cannot load config",
            exc_info=e,
            metadata={'path': args.config}
        )
        return EXIT_USAGE

    logger = create_logger("cli", level=config.logging_level)
    if args.config:
        logger.info(
            event=LogEvent.CONFIG_LOADED,
            message="Loaded codec config",
            metadata={'path': args.config, 'altitude': config.altitude.value}
        )

    return _run(args, config, logger)


if __name__ == '__main__':
    sys.exit(main())
