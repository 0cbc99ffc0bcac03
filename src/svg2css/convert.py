"""SVG to CSS conversion pipeline.

This module drives a single conversion run:
- list: Read the entries of the source directory
- filter: Keep files with the configured extension
- convert: Normalize each file and build its CSS entry
- write: Join all entries and write the destination once

Files are processed in directory-listing order. A read error on any file
aborts the run before the destination is written.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

import yaml

from .blocks import make_entry
from .dimensions import (
    Dimensions,
    RootReader,
    extract_dimensions_from_text,
    read_root_element,
)
from .normalize import (
    SVG_EXTENSION,
    filter_files,
    normalize_content,
    read_source,
    selector_name,
)

NO_INPUT_WARNING = "No input files found!"

CONFIG_KEYS = {
    "prefix": str,
    "write_dimensions": bool,
    "extension": str,
}

ProgressCallback = Callable[[str], None]


@dataclass(frozen=True)
class ConvertConfig:
    """Configuration for one conversion run."""

    source_dir: Path
    destination: Path
    prefix: str = ""
    write_dimensions: bool = False
    extension: str = SVG_EXTENSION


@dataclass
class FileResult:
    """Result of converting a single source file."""

    file_path: Path
    name: str
    dimensions: Dimensions | None = None


@dataclass
class ConvertReport:
    """Report of a conversion run."""

    destination: Path
    write_dimensions: bool = False
    file_results: list[FileResult] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    output_size: int = 0

    @property
    def file_count(self) -> int:
        """Number of files converted."""
        return len(self.file_results)

    @property
    def missing_dimensions(self) -> list[FileResult]:
        """Files without dimensions (only when dimensions are requested)."""
        if not self.write_dimensions:
            return []
        return [r for r in self.file_results if r.dimensions is None]


def parse_config_file(config_path: Path) -> dict:
    """Parse a YAML configuration file.

    Supported keys: prefix, write_dimensions, extension.

    Args:
        config_path: Path to the YAML file.

    Returns:
        Dictionary with the keys present in the file.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file is not valid YAML.
        ValueError: If the config format is invalid.
    """
    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    # An empty file is a valid, empty config
    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ValueError("Config file must be a YAML dictionary")

    result = {}
    for key, value in data.items():
        if key not in CONFIG_KEYS:
            valid_keys = ", ".join(CONFIG_KEYS)
            raise ValueError(f"Unknown config key '{key}'. Valid keys: {valid_keys}")

        expected = CONFIG_KEYS[key]
        if not isinstance(value, expected):
            raise ValueError(
                f"Config key '{key}' must be of type {expected.__name__}"
            )
        result[key] = value

    if "extension" in result and not result["extension"].startswith("."):
        raise ValueError("Config key 'extension' must start with '.'")

    return result


def list_source_dir(source_dir: Path) -> list[str]:
    """List entry names of the source directory in listing order.

    Raises:
        OSError: If the directory cannot be listed.
    """
    return os.listdir(source_dir)


def convert_file(
    file_path: Path,
    config: ConvertConfig,
    reader: RootReader = read_root_element,
) -> tuple[str, FileResult]:
    """Convert a single SVG file into its output entry.

    Args:
        file_path: Path to the SVG file.
        config: Conversion configuration.
        reader: Markup reader used for dimension extraction.

    Returns:
        Tuple of (entry text, FileResult).

    Raises:
        OSError: If the file cannot be read.
    """
    name = selector_name(file_path.name, config.prefix)
    raw = read_source(file_path)
    content = normalize_content(raw)

    dimensions = None
    if config.write_dimensions:
        dimensions = extract_dimensions_from_text(raw, reader)

    entry = make_entry(name, content, dimensions)
    return entry, FileResult(file_path=file_path, name=name, dimensions=dimensions)


def convert_files(
    file_names: list[str],
    config: ConvertConfig,
    progress: ProgressCallback | None = None,
    reader: RootReader = read_root_element,
) -> tuple[str, ConvertReport]:
    """Convert the given source directory entries into a CSS document.

    Args:
        file_names: Entry names inside config.source_dir.
        config: Conversion configuration.
        progress: Optional callback receiving progress messages.
        reader: Markup reader used for dimension extraction.

    Returns:
        Tuple of (CSS document, ConvertReport). The destination is not written.

    Raises:
        OSError: If any source file cannot be read.
    """
    report = ConvertReport(
        destination=config.destination, write_dimensions=config.write_dimensions
    )

    input_files = filter_files(file_names, config.extension)
    if not input_files:
        report.warnings.append(NO_INPUT_WARNING)

    output: list[str] = []
    for file_name in input_files:
        file_path = config.source_dir / file_name
        if progress:
            progress(f"Processing: {file_path}")

        entry, result = convert_file(file_path, config, reader)
        output.append(entry)
        report.file_results.append(result)

    return "\n".join(output), report


def write_output(destination: Path, document: str) -> int:
    """Write the CSS document to the destination.

    Returns:
        Number of characters written.

    Raises:
        OSError: If the destination cannot be written.
    """
    with open(destination, "w", encoding="utf-8", newline="\n") as f:
        return f.write(document)


def convert_directory(
    config: ConvertConfig,
    progress: ProgressCallback | None = None,
    reader: RootReader = read_root_element,
) -> ConvertReport:
    """Convert all SVG files of a directory into a single CSS file.

    The directory is listed before any file is read, and the destination
    is written only after every file has been converted.

    Args:
        config: Conversion configuration.
        progress: Optional callback receiving progress messages.
        reader: Markup reader used for dimension extraction.

    Returns:
        ConvertReport for the run.

    Raises:
        OSError: If the directory cannot be listed, a file cannot be read,
            or the destination cannot be written.
    """
    file_names = list_source_dir(config.source_dir)
    document, report = convert_files(file_names, config, progress, reader)

    if progress:
        progress(f"Writing file {config.destination}")
    report.output_size = write_output(config.destination, document)
    return report


def format_convert_report(report: ConvertReport) -> str:
    """Format conversion report as text.

    Args:
        report: Conversion report.

    Returns:
        Formatted text.
    """
    lines: list[str] = []
    lines.append("=" * 60)
    lines.append("SUMMARY")
    lines.append("=" * 60)
    lines.append(f"Output: {report.destination}")
    lines.append(f"Files converted: {report.file_count}")
    lines.append(f"Output size: {report.output_size} characters")

    if report.write_dimensions:
        lines.append(f"Without dimensions: {len(report.missing_dimensions)}")
        for result in report.missing_dimensions:
            lines.append(f"  - {result.file_path}")

    return "\n".join(lines)
