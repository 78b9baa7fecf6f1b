"""SVG parser — facade over xml.etree.ElementTree.

Converts raw SVG string → SvgDocument rooted at the <svg> element.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from svgcode.errors import MissingRootElement, ParseFailure

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

# Serialize the SVG namespace as the default one instead of ns0:
ET.register_namespace("", SVG_NS)
ET.register_namespace("xlink", XLINK_NS)


def local_name(tag: object) -> str:
    """Strip the namespace from an element tag. Comments and PIs map to ""."""
    if not isinstance(tag, str):
        return ""
    return tag.split("}")[-1] if "}" in tag else tag


@dataclass
class SvgDocument:
    """A parsed SVG document. Mutated in place by the normalization stages."""

    root: ET.Element

    def iter_elements(self, name: str):
        """Yield every element with the given local name, in document order."""
        for el in self.root.iter():
            if local_name(el.tag) == name:
                yield el

    def count(self, name: str) -> int:
        return sum(1 for _ in self.iter_elements(name))


def parse_svg(svg_text: str) -> SvgDocument:
    """Parse raw SVG text. Raises ParseFailure or MissingRootElement."""
    parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
    try:
        root = ET.fromstring(svg_text, parser=parser)
    except ET.ParseError as e:
        logger.warning("SVG parse failed: %s", e)
        raise ParseFailure(str(e)) from e

    # First <svg> in document order, so an SVG wrapped in another XML root still works
    svg_root = next((el for el in root.iter() if local_name(el.tag) == "svg"), None)
    if svg_root is None:
        raise MissingRootElement(f"no <svg> element found (root is <{local_name(root.tag)}>)")

    logger.debug("Parsed SVG: %d nodes", sum(1 for _ in svg_root.iter()))
    return SvgDocument(root=svg_root)
