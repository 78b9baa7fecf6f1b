"""Group flattening — splice every <g> element's children into its parent."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from svgcode.svg.parser import SvgDocument, local_name

logger = logging.getLogger(__name__)

GROUP_TAG = "g"


def flatten_groups(doc: SvgDocument) -> int:
    """Remove all groups in place, keeping document order. Returns groups removed.

    Group attributes (transform, style, fill, ...) are dropped, not pushed down
    onto the children.
    """
    removed = _flatten_children(doc.root)
    if removed:
        logger.debug("Flattened %d group(s)", removed)
    return removed


def _flatten_children(parent: ET.Element) -> int:
    removed = 0
    index = 0
    while index < len(parent):
        child = parent[index]
        if local_name(child.tag) == GROUP_TAG:
            _splice_group(parent, index, child)
            removed += 1
            # the group's first child now sits at `index` and gets visited next
            continue
        removed += _flatten_children(child)
        index += 1
    return removed


def _splice_group(parent: ET.Element, index: int, group: ET.Element) -> None:
    children = list(group)
    _append_text(parent, index, group.text)
    del parent[index]
    for offset, child in enumerate(children):
        parent.insert(index + offset, child)

    if children:
        last = children[-1]
        last.tail = _join(last.tail, group.tail)
    else:
        _append_text(parent, index, group.tail)


def _append_text(parent: ET.Element, index: int, text: str | None) -> None:
    """Attach text to whatever precedes position `index` in `parent`."""
    if not text:
        return
    if index == 0:
        parent.text = _join(parent.text, text)
    else:
        prev = parent[index - 1]
        prev.tail = _join(prev.tail, text)


def _join(a: str | None, b: str | None) -> str | None:
    if not b:
        return a
    return (a or "") + b
