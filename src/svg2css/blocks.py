"""CSS block generation."""

import base64

from .dimensions import Dimensions


def encode_content(content: str) -> str:
    """Base64-encode content as UTF-8 without line wrapping."""
    return base64.b64encode(content.encode("utf-8")).decode("ascii")


def make_css_block(name: str, content: str) -> str:
    """Generate a named CSS block with an inline background image.

    Args:
        name: Selector name.
        content: Normalized SVG content to be encoded.

    Returns:
        Generated CSS block.
    """
    encoded = encode_content(content)
    return (
        f".{name} {{\n"
        f"    background-image: url(data:image/svg+xml;base64,{encoded});\n"
        f"}}\n"
    )


def make_dimension_vars(name: str, dimensions: Dimensions) -> str:
    """Generate SCSS width/height variable declarations."""
    return (
        f"${name}-width: {dimensions.width};\n"
        f"${name}-height: {dimensions.height};\n"
    )


def make_entry(name: str, content: str, dimensions: Dimensions | None = None) -> str:
    """Generate the output entry for one file.

    Args:
        name: Selector name.
        content: Normalized SVG content.
        dimensions: Optional dimensions, emitted before the block.

    Returns:
        Variable declarations (if any) followed by the CSS block.
    """
    block = make_css_block(name, content)
    if dimensions is None:
        return block
    return make_dimension_vars(name, dimensions) + block
