"""SVG to Code — normalize SVG icons to a single color, fixed size and compact markup."""

__version__ = "0.1.0"
