"""Whitespace compaction on serialized SVG text."""

from __future__ import annotations

import re

# Order matters: inter-tag runs must disappear before runs collapse to one space
_INTER_TAG_RE = re.compile(r">\s+<")
_WS_RUN_RE = re.compile(r"\s{2,}")
_CONTROL_WS_RE = re.compile(r"[\n\r\t]+")


def compact_whitespace(svg_text: str) -> str:
    """Drop whitespace between tags, collapse runs to one space, strip newlines/tabs."""
    svg_text = _INTER_TAG_RE.sub("><", svg_text)
    svg_text = _WS_RUN_RE.sub(" ", svg_text)
    return _CONTROL_WS_RE.sub("", svg_text)
