"""Command line entry point."""

import argparse
import logging
import sys
from pathlib import Path

from ruamel.yaml.error import YAMLError

from zw_converter.converter import MapConverter
from zw_converter.data import load_settings
from zw_converter.data.models import ConverterSettings
from zw_converter.errors import ConversionError
from zw_converter.export.render import render
from zw_converter.export.template import splice_sections, write_data_file
from zw_converter.loader import load_raw_map

logger = logging.getLogger(__name__)

USAGE = (
    "Please try again with two arguments:\n"
    "1. Elite Command JSON file\n"
    "2. Zetawar data file"
)


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the converter."""
    parser = argparse.ArgumentParser(
        prog="zw-convert",
        description="Add an Elite Command map to a Zetawar data.cljs file.",
    )
    # Counted by hand, so a wrong count shows the usage text instead of an error
    parser.add_argument("paths", nargs="*", type=Path, help="MAP_JSON DATA_FILE")
    parser.add_argument("--settings", type=Path, help="Alternative settings YAML")
    parser.add_argument(
        "--dry-run", action="store_true", help="Print the result, don't write it"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def convert_file(
    map_path: Path, data_path: Path, settings: ConverterSettings, dry_run: bool = False
) -> str:
    """Convert a map and add it to the data file; returns the updated data file."""
    raw = load_raw_map(map_path)
    result = MapConverter(settings=settings).convert(raw)
    rendered = render(result)
    if dry_run:
        return splice_sections(data_path.read_text(encoding="utf-8"), rendered, settings)
    return write_data_file(data_path, rendered, settings)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if len(args.paths) != 2:
        print(USAGE)
        return 2

    map_path, data_path = args.paths
    # ValueError covers pydantic validation and undecodable input
    try:
        settings = load_settings(args.settings)
        updated = convert_file(map_path, data_path, settings, dry_run=args.dry_run)
    except (ConversionError, ValueError, YAMLError, OSError) as err:
        logger.error(f"Conversion failed: {err}")
        return 1

    if args.dry_run:
        print(updated)
    return 0


if __name__ == "__main__":
    sys.exit(main())
