"""svg2css - Convert a folder of SVG files into a CSS file with inline images."""

__version__ = "0.1.0"

from .blocks import (
    encode_content,
    make_css_block,
    make_dimension_vars,
    make_entry,
)
from .dimensions import (
    Dimensions,
    RootElement,
    RootReader,
    extract_dimensions,
    extract_dimensions_from_text,
    read_root_element,
)
from .normalize import (
    filter_files,
    normalize_content,
    selector_name,
)
from .convert import (
    ConvertConfig,
    ConvertReport,
    FileResult,
    convert_directory,
    convert_files,
    format_convert_report,
    parse_config_file,
)

__all__ = [
    # Blocks
    "encode_content",
    "make_css_block",
    "make_dimension_vars",
    "make_entry",
    # Dimensions
    "Dimensions",
    "RootElement",
    "RootReader",
    "extract_dimensions",
    "extract_dimensions_from_text",
    "read_root_element",
    # Normalize
    "filter_files",
    "normalize_content",
    "selector_name",
    # Convert (pipeline)
    "ConvertConfig",
    "ConvertReport",
    "FileResult",
    "convert_directory",
    "convert_files",
    "format_convert_report",
    "parse_config_file",
]
