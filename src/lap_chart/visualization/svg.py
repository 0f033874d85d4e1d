"""Minimal SVG element tree used to build lap chart documents."""

import xml.etree.ElementTree as ET
from typing import Dict, List, Optional, Union

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

Number = Union[int, float]
AttributeValue = Union[str, Number]


def format_number(value: Number) -> str:
    """Format a coordinate for SVG output.

    Integral values print without a decimal point and fractions keep at
    most four decimals, so identical input always serialises identically.

    Args:
        value: Number to format

    Returns:
        Formatted number text
    """
    if isinstance(value, int):
        return str(value)
    if float(value).is_integer():
        return str(int(value))
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _attribute_text(value: AttributeValue) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)
    return str(value)


class SvgElement:
    """A single SVG element with ordered attributes and children.

    Attributes are written in insertion order. Names given with underscores
    are written with hyphens, so ``font_size=12`` becomes ``font-size="12"``.
    """

    def __init__(self, tag: str, text: Optional[str] = None, **attributes: AttributeValue):
        self.tag = tag
        self.text = text
        self.attributes: Dict[str, str] = {}
        self.children: List["SvgElement"] = []
        self.set(**attributes)

    def set(self, **attributes: AttributeValue) -> "SvgElement":
        for name, value in attributes.items():
            self.attributes[name.rstrip("_").replace("_", "-")] = _attribute_text(value)
        return self

    def append(self, child: "SvgElement") -> "SvgElement":
        """Append a child element and return it."""
        self.children.append(child)
        return child

    def extend(self, children: List["SvgElement"]) -> "SvgElement":
        self.children.extend(children)
        return self

    def add(self, tag: str, text: Optional[str] = None, **attributes: AttributeValue) -> "SvgElement":
        """Create a child element and return it."""
        return self.append(SvgElement(tag, text, **attributes))

    def to_etree(self) -> ET.Element:
        element = ET.Element(self.tag, self.attributes)
        if self.text is not None:
            element.text = self.text
        for child in self.children:
            element.append(child.to_etree())
        return element

    def to_string(self) -> str:
        """Serialise the element and its subtree to SVG text."""
        return ET.tostring(self.to_etree(), encoding="unicode")

    def __repr__(self) -> str:
        return f"SvgElement({self.tag!r}, children={len(self.children)})"


def group(*children: SvgElement, translate: Optional[tuple] = None) -> SvgElement:
    """Create a ``g`` element, optionally translated by ``(dx, dy)``.

    Args:
        children: Elements placed inside the group
        translate: Optional ``(dx, dy)`` offset

    Returns:
        Group element
    """
    g = SvgElement("g")
    if translate is not None:
        dx, dy = translate
        g.set(transform=f"translate({format_number(dx)}, {format_number(dy)})")
    g.extend(list(children))
    return g


def svg_root(width: Number, height: Number) -> SvgElement:
    """Create the root ``svg`` element with explicit pixel dimensions."""
    return SvgElement("svg", xmlns=SVG_NAMESPACE, width=width, height=height)
