"""Root width/height override."""

from __future__ import annotations

from svgcode.svg.parser import SvgDocument


def format_dimension(value: int | float | str) -> str:
    """String form of a caller-supplied dimension. Values are not validated."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def set_dimensions(doc: SvgDocument, width: int | float | str, height: int | float | str) -> None:
    # remove first so the attributes always land at the end of the list
    attrib = doc.root.attrib
    attrib.pop("width", None)
    attrib.pop("height", None)
    attrib["width"] = format_dimension(width)
    attrib["height"] = format_dimension(height)
