"""Utility functions for SVG markup parsing."""

from xml.etree import ElementTree as ET

# SVG namespace mappings
SVG_NAMESPACES = {
    "svg": "http://www.w3.org/2000/svg",
}


def parse_svg_text(text: str) -> ET.Element:
    """Parse SVG markup and return the root element.

    Args:
        text: Raw SVG markup.

    Returns:
        Root element of the parsed SVG.

    Raises:
        ET.ParseError: If the text is not valid XML.
    """
    return ET.fromstring(text)


def split_tag(tag: str) -> tuple[str, str]:
    """Split a tag into namespace URI and local name.

    Args:
        tag: Full tag name, possibly with namespace.

    Returns:
        Tuple of (namespace, local_name). Namespace is empty if not present.

    Example:
        >>> split_tag("{http://www.w3.org/2000/svg}svg")
        ('http://www.w3.org/2000/svg', 'svg')
    """
    if tag.startswith("{"):
        namespace, local_name = tag[1:].split("}", 1)
        return namespace, local_name
    return "", tag

