"""Command line interface for svg2css."""

import argparse
import sys
from pathlib import Path

from . import __version__
from .convert import ConvertConfig, convert_directory, format_convert_report, parse_config_file

DESCRIPTION = """\
Svg2Css Utility

Takes a folder of SVG-files and translates them into a single CSS-file with
inline background-images. The filenames will be used as CSS-selectors for the
generated rules."""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="svg2css",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert all icons
  %(prog)s icons/ build/icons.css

  # Prefix selectors and write SCSS size variables
  %(prog)s icons/ build/_icons.scss --prefix ic- --write-dimensions

  # Read options from a YAML file
  %(prog)s icons/ build/icons.css --config svg2css.yaml
""",
    )
    parser.add_argument(
        "source_dir", type=Path, nargs="?", help="Folder containing SVG files"
    )
    parser.add_argument(
        "target_file", type=Path, nargs="?", help="CSS file to write"
    )
    parser.add_argument(
        "--prefix", "-p", type=str, help="Prefix for generated selector names"
    )
    parser.add_argument(
        "--write-dimensions",
        "-d",
        action="store_true",
        default=None,
        help="Write $name-width / $name-height variables for each file",
    )
    parser.add_argument(
        "--config", "-c", type=Path, help="Path to YAML config file"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code:
        - 0: Success
        - 1: Missing arguments or I/O error
        - 2: Config file error
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.source_dir is None or args.target_file is None:
        parser.print_help()
        return 1

    # Parse config file
    options: dict = {}
    if args.config is not None:
        if not args.config.exists():
            print(f"Error: Config file not found: {args.config}", file=sys.stderr)
            return 1
        try:
            options = parse_config_file(args.config)
        except Exception as e:
            print(f"Error: Failed to parse config file: {e}", file=sys.stderr)
            return 2

    # Command line options override the config file
    if args.prefix is not None:
        options["prefix"] = args.prefix
    if args.write_dimensions is not None:
        options["write_dimensions"] = args.write_dimensions

    config = ConvertConfig(
        source_dir=args.source_dir, destination=args.target_file, **options
    )

    try:
        report = convert_directory(config, progress=print)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for warning in report.warnings:
        print(warning, file=sys.stderr)

    print(format_convert_report(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
