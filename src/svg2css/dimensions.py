"""SVG dimension extraction.

Width and height are read from the root <svg> element. When neither
attribute is set, the viewBox ("min-x min-y width height") is used instead.
Values are returned as raw strings; units are not parsed.
"""

from dataclasses import dataclass, field
from typing import Callable
from xml.etree import ElementTree as ET

from .utils import SVG_NAMESPACES, parse_svg_text, split_tag


@dataclass(frozen=True)
class Dimensions:
    """Raw width/height strings of an SVG root element."""

    width: str
    height: str


@dataclass
class RootElement:
    """Namespace, name and attributes of a parsed root element."""

    namespace: str
    name: str
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def is_svg(self) -> bool:
        """Check if this is an <svg> element in the SVG namespace or in none."""
        return self.namespace in ("", SVG_NAMESPACES["svg"]) and self.name == "svg"


# Markup reader: raw text -> root element, or None if it cannot be parsed.
RootReader = Callable[[str], RootElement | None]


def read_root_element(text: str) -> RootElement | None:
    """Read the root element of SVG markup using ElementTree.

    Args:
        text: Raw SVG markup.

    Returns:
        RootElement, or None if the markup is not well-formed.
    """
    try:
        root = parse_svg_text(text)
    except ET.ParseError:
        return None

    namespace, name = split_tag(root.tag)
    return RootElement(namespace=namespace, name=name, attributes=dict(root.attrib))


def _is_unset(value: str) -> bool:
    return value in ("", "0")


def parse_view_box(view_box: str | None) -> Dimensions | None:
    """Take width and height from a viewBox attribute value.

    Args:
        view_box: viewBox value or None if the attribute is missing.

    Returns:
        Dimensions from the 3rd and 4th tokens, or None if unusable.
    """
    if view_box is None:
        return None

    tokens = view_box.split()
    if len(tokens) < 4:
        return None

    return Dimensions(width=tokens[2], height=tokens[3])


def extract_dimensions(root: RootElement | None) -> Dimensions | None:
    """Extract dimensions from an SVG root element.

    Args:
        root: Root element, or None if the markup could not be read.

    Returns:
        Dimensions, or None if not available.
    """
    if root is None or not root.is_svg:
        return None

    width = root.attributes.get("width", "")
    height = root.attributes.get("height", "")

    if _is_unset(width) and _is_unset(height):
        return parse_view_box(root.attributes.get("viewBox"))

    return Dimensions(width=width, height=height)


def extract_dimensions_from_text(
    text: str, reader: RootReader = read_root_element
) -> Dimensions | None:
    """Read SVG markup and extract its dimensions.

    Args:
        text: Raw SVG markup.
        reader: Markup reader returning the root element.

    Returns:
        Dimensions, or None if not available.
    """
    return extract_dimensions(reader(text))
