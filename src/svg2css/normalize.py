"""Source file selection and content normalization.

Raw SVG text is reduced to a single line before it is encoded:
- XML comments are removed (also when they span several lines)
- line breaks are removed
- tabs are replaced with spaces
"""

import re
from pathlib import Path

SVG_EXTENSION = ".svg"

COMMENT_PATTERN = re.compile(r"<!--.*?-->", re.DOTALL)
LINEBREAK_PATTERN = re.compile(r"[\n\r]")
# Matches a tab pair or a single tab, so a run of three tabs becomes two spaces.
TAB_PATTERN = re.compile(r"\t\t|\t")


def normalize_content(text: str) -> str:
    """Clean up comments, line breaks and tabs.

    Args:
        text: Raw file content.

    Returns:
        Single line content string.
    """
    text = COMMENT_PATTERN.sub("", text)
    text = LINEBREAK_PATTERN.sub("", text)
    return TAB_PATTERN.sub(" ", text)


def filter_files(file_names: list[str], extension: str = SVG_EXTENSION) -> list[str]:
    """Filter file names by extension.

    The comparison is case-sensitive and only the final suffix counts.

    Args:
        file_names: File names to filter.
        extension: Extension including the dot (e.g. ".svg").

    Returns:
        Matching file names in their original order.
    """
    return [name for name in file_names if Path(name).suffix == extension]


def base_name(file_name: str) -> str:
    """Return the file name without its final extension.

    Example:
        >>> base_name("arrow-left.svg")
        'arrow-left'
    """
    return Path(file_name).stem


def selector_name(file_name: str, prefix: str = "") -> str:
    """Build the CSS selector name for a source file.

    Args:
        file_name: Source file name.
        prefix: Optional prefix prepended to the base name.

    Returns:
        Selector name (not sanitized).
    """
    name = base_name(file_name)
    if prefix:
        return f"{prefix}{name}"
    return name


def read_source(file_path: Path) -> str:
    """Read a source file as UTF-8 text.

    Invalid byte sequences are replaced with U+FFFD.

    Raises:
        OSError: If the file cannot be read.
    """
    with open(file_path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()
