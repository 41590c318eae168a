"""Generate an SVG preview of one schematic symbol record.

Usage:
    gen-symbol-svg symbol.json [-o symbol.svg] [--size 500] [--unit 1]

The input is a JSON symbol record (see libsym.record). Without -o the SVG
is written to stdout.
"""
import argparse
import logging
import sys

from libsym.constants import DEFAULT_SIZE, DEFAULT_UNIT
from libsym.record import load_symbol
from libsym.render import symbol_to_elements
from libsym.types import RenderOptions, SymbolError
from svgkit.geometry import GeometryError
from svgkit.svg import to_xml


def _positive_int(text: str) -> int:
    n = int(text)
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {text}")
    return n


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="gen-symbol-svg",
                                description="Render a schematic symbol record to SVG.")
    p.add_argument("input", help="symbol record (.json)")
    p.add_argument("-o", "--output", help="output .svg (default: stdout)")
    p.add_argument("--size", type=_positive_int, default=DEFAULT_SIZE,
                   help=f"canvas width/height in px (default {DEFAULT_SIZE})")
    p.add_argument("--unit", type=int, default=DEFAULT_UNIT,
                   help=f"unit of a multi-unit symbol to draw (default {DEFAULT_UNIT})")
    p.add_argument("--debug-extents", action="store_true",
                   help="outline the accumulated extents")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="[%(levelname)s] %(name)s: %(message)s")

    opts = RenderOptions(size=args.size, unit=args.unit, debug_extents=args.debug_extents)
    try:
        symbol = load_symbol(args.input)
        root = symbol_to_elements(symbol, opts)
    except (SymbolError, GeometryError) as e:
        print(f"error: {args.input}: {e}", file=sys.stderr)
        return 1
    svg_content = to_xml(root)

    if args.output is None:
        sys.stdout.write(svg_content)
        return 0

    with open(args.output, "w", encoding="utf-8") as f:
        f.write(svg_content)
    viewport = root.children[0]
    print(f"Symbol {symbol.name or args.input} written to {args.output}")
    print(f"Unit:      {args.unit}")
    print(f"Elements:  {len(viewport.children or [])}")
    print(f"Transform: {viewport.attrs['transform']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
