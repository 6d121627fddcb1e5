"""
Command-line entry point for dota_serializers.

Usage:
    python -m dota_serializers abilities --data npc_abilities.json --i18n abilities_english.json
    python -m dota_serializers heroes --data npc_heroes.json -o heroes.json
    python -m dota_serializers all --source-dir path/to/checkout --output-dir output
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .errors import ConfigError, SerializerError
from .game_data.loaders import GameDataFileLoader
from .service import SOURCES, SerializerService, records_to_json
from .settings import AppSettings
from .utils.logging_config import setup_logging

ALL_SOURCES = "all"


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="dota_serializers",
        description="Serialize Dota game data into public API JSON.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "source",
        choices=[*SOURCES, ALL_SOURCES],
        help="Source to serialize, or 'all' to serialize every source from a checkout",
    )
    parser.add_argument("--data", type=Path, help="Decoded data file for a single source")
    parser.add_argument("--i18n", type=Path, help="Localization file (abilities and items)")
    parser.add_argument("-o", "--output", type=Path, help="Output file (default: stdout)")
    parser.add_argument("--source-dir", type=Path, help="Root of a local upstream checkout")
    parser.add_argument("--output-dir", type=Path, help="Output directory for 'all'")
    parser.add_argument("--settings-file", type=Path, help="INI settings file to use")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    return parser


def serialize_one(args: argparse.Namespace, service: SerializerService) -> bytes:
    """Serialize a single source, from explicit files or from the source directory."""
    if args.data is None:
        if service.source_dir is None:
            raise ConfigError("--data or a source directory is required")
        return records_to_json(service.serialize_source(args.source))

    source = service.get_source(args.source)
    if source.needs_i18n and args.i18n is None:
        raise ConfigError(f"--i18n is required for '{args.source}'")

    loader = GameDataFileLoader()
    data = loader.read_json_file(args.data)
    i18n = loader.read_json_file(args.i18n) if source.needs_i18n else None
    return service.serialize_to_json(args.source, data, i18n)


def serialize_all(service: SerializerService, output_dir: Path) -> List[Path]:
    """Serialize every registered source into <output_dir>/<source>.json."""
    if service.source_dir is None:
        raise ConfigError("A source directory is required to serialize all sources")

    output_dir.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []

    for name, records in service.serialize_all().items():
        path = output_dir / f"{name}.json"
        path.write_bytes(records_to_json(records))
        written.append(path)

    return written


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)
    logger = logging.getLogger(f"{__name__}.main")

    settings = AppSettings(settings_file=args.settings_file)
    setup_logging(settings, console_level="DEBUG" if args.verbose else None)
    logger.debug(f"Configuration loaded from {settings.get_settings_file_path()}")

    source_dir = args.source_dir or settings.source_dir

    validation = settings.validate(source_dir)
    for warning in validation.warnings:
        logger.warning(f"Configuration: {warning}")
    if not validation.is_valid:
        logger.error("Configuration validation failed:")
        for error in validation.errors:
            logger.error(f"  {error}")
        return 1

    service = SerializerService(source_dir)

    try:
        if args.source == ALL_SOURCES:
            written = serialize_all(service, args.output_dir or settings.output_dir)
            for path in written:
                logger.info(f"Wrote {path}")
            return 0

        body = serialize_one(args, service)
        if args.output:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            args.output.write_bytes(body)
            logger.info(f"Wrote {args.output}")
        else:
            sys.stdout.buffer.write(body + b"\n")
            sys.stdout.flush()
        return 0

    except (SerializerError, ConfigError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
