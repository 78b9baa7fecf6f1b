"""Fill color handling: detect the document's color, then force a single root fill.

Fill is inherited in SVG, so once per-path overrides are stripped the root
``fill`` is the only color source for every path.
"""

from __future__ import annotations

import logging

from svgcode.svg.parser import SvgDocument

logger = logging.getLogger(__name__)

MONITORED_TAG = "path"


def detect_fill_color(doc: SvgDocument) -> str | None:
    """Root fill if present, else the first path fill in document order."""
    root_fill = doc.root.get("fill")
    if root_fill is not None:
        return root_fill

    for path in doc.iter_elements(MONITORED_TAG):
        fill = path.get("fill")
        if fill is not None:
            return fill
    return None


def unify_fill(doc: SvgDocument, color: str) -> int:
    """Set the root fill to ``color`` and strip fill from every path.

    Returns the number of path fills removed. Other element kinds keep theirs.
    """
    doc.root.set("fill", color)

    stripped = 0
    for path in doc.iter_elements(MONITORED_TAG):
        if path.attrib.pop("fill", None) is not None:
            stripped += 1
    logger.debug("Root fill=%s, stripped %d path fill(s)", color, stripped)
    return stripped
