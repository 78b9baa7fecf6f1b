"""Shared test fixtures."""

from __future__ import annotations

import pytest


RED_GROUP_SVG = '<svg fill="#ff0000"><g><path fill="#00ff00"/></g></svg>'

BLUE_PATH_SVG = '<svg><path fill="#0000ff"/></svg>'

NO_FILL_SVG = '<svg viewBox="0 0 24 24"><path d="M0 0L24 24"/></svg>'

# Icon exported from an editor: namespaced, indented, nested groups with their own fills
GROUPED_ICON_SVG = '''<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <!-- home icon -->
  <g id="layer1" transform="translate(1 1)">
    <g fill="#333333">
      <path d="M15 21v-8a1 1 0 0 0-1-1h-4a1 1 0 0 0-1 1v8" fill="#4ECDC4"/>
      <path d="M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999A2 2 0 0 1 21 10v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"/>
    </g>
    <circle cx="12" cy="12" r="3" fill="#FF6B6B"/>
  </g>
  <rect x="0" y="0" width="4" height="4"/>
</svg>'''

STROKE_ICON_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2">
  <circle cx="12" cy="12" r="10"/>
  <circle cx="8" cy="9" r="1"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
</svg>'''

FILLED_COMPLEX_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 256 259">
  <g>
    <path d="M128 10 L240 80 L240 200 L128 249 L16 200 L16 80 Z" fill="#4ECDC4"/>
    <path d="M128 50 L200 100 L200 180 L128 220 L56 180 L56 100 Z" fill="#45B7D1"/>
  </g>
  <g transform="scale(0.5)">
    <circle cx="128" cy="130" r="30" fill="#FF6B6B"/>
    <text x="10" y="20">Hello   world</text>
  </g>
</svg>'''

ALL_SAMPLES = [RED_GROUP_SVG, BLUE_PATH_SVG, NO_FILL_SVG, GROUPED_ICON_SVG, STROKE_ICON_SVG, FILLED_COMPLEX_SVG]


@pytest.fixture
def red_group_svg() -> str:
    return RED_GROUP_SVG


@pytest.fixture
def blue_path_svg() -> str:
    return BLUE_PATH_SVG


@pytest.fixture
def grouped_icon_svg() -> str:
    return GROUPED_ICON_SVG


@pytest.fixture
def filled_complex_svg() -> str:
    return FILLED_COMPLEX_SVG
