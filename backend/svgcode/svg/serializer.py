"""Write an SvgDocument back to markup."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from svgcode.svg.parser import SvgDocument

# Editor namespaces commonly found in exported icons
_KNOWN_NAMESPACES = {
    "inkscape": "http://www.inkscape.org/namespaces/inkscape",
    "sodipodi": "http://sodipodi.sourceforge.net/DTD/sodipodi-0.0.dtd",
    "rdf": "http://www.w3.org/1999/02/22-rdf-syntax-ns#",
    "cc": "http://creativecommons.org/ns#",
    "dc": "http://purl.org/dc/elements/1.1/",
}

for _prefix, _uri in _KNOWN_NAMESPACES.items():
    ET.register_namespace(_prefix, _uri)


def serialize_svg(doc: SvgDocument) -> str:
    """Serialize the <svg> element only: no XML declaration, no trailing text."""
    root = doc.root
    tail, root.tail = root.tail, None
    try:
        return ET.tostring(root, encoding="unicode")
    finally:
        root.tail = tail
