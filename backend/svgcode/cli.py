"""
SVG to Code — normalize SVG files from the command line.

Usage:
  python -m svgcode icon.svg                          # prints normalized SVG
  python -m svgcode icon.svg -o out.svg --width 64    # saves it, 64px wide
  python -m svgcode icons/ -o normalized/ --color red # batch process folder
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from svgcode.config import settings
from svgcode.engine.pipeline import normalize_text
from svgcode.engine.state import NormalizationConfig
from svgcode.errors import NormalizationError


def process_file(input_path: Path, config: NormalizationConfig, output_path: Path | None = None) -> bool:
    """Normalize a single SVG file. Returns False if it could not be normalized."""
    try:
        raw = input_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        print(f"  ERROR: {input_path.name}: cannot read file: {e}", file=sys.stderr)
        return False

    try:
        state, text = normalize_text(raw, config, settings.default_color)
    except NormalizationError as e:
        print(f"  ERROR: {input_path.name}: {e}", file=sys.stderr)
        return False

    detected = state.detected_color if state.detected_color is not None else "none"
    print(f"  {input_path.name}: detected color {detected}", file=sys.stderr)

    if output_path:
        output_path.write_text(text, encoding="utf-8")
        print(f"  → Saved: {output_path}", file=sys.stderr)
    else:
        print(text)
    return True


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="SVG to Code — single color, fixed size, compact SVG")
    parser.add_argument("input", help="SVG file or folder of SVGs")
    parser.add_argument("-o", "--output", help="Output file or folder")
    parser.add_argument("--width", default=str(settings.default_width), help="Output width")
    parser.add_argument("--height", default=str(settings.default_height), help="Output height")
    parser.add_argument("--color", default=None, help="Fill color, applied over any detected one (default: detected from the file)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline details")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    config = NormalizationConfig(width=args.width, height=args.height, color=args.color)
    source = Path(args.input)

    if source.is_dir():
        svg_files = sorted(p for p in source.iterdir() if p.suffix.lower() == ".svg")
        if not svg_files:
            print("No .svg files found in folder.", file=sys.stderr)
            return 1

        out_dir = Path(args.output) if args.output else source.with_name(source.name + "_normalized")
        out_dir.mkdir(parents=True, exist_ok=True)

        print(f"Processing {len(svg_files)} files...", file=sys.stderr)
        success = sum(process_file(p, config, out_dir / p.name) for p in svg_files)
        print(f"Done: {success}/{len(svg_files)} normalized → {out_dir}", file=sys.stderr)
        return 0 if success == len(svg_files) else 1

    if not source.exists():
        print(f"File not found: {source}", file=sys.stderr)
        return 1

    output = Path(args.output) if args.output else None
    return 0 if process_file(source, config, output) else 1
