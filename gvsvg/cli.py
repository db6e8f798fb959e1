"""
Command-line interface for gvsvg.

Usage:
    gvsvg ./graph.dot
    gvsvg ./graph.dot -o ./build/graph.svg
    gvsvg ./graph.dot -T svgz -K neato
    gvsvg ./layout.json --json -o -
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from gvsvg import __version__
from gvsvg.backend.features import get_device
from gvsvg.core.sink import open_sink
from gvsvg.core.types import FontNames
from gvsvg.engine.layout import LayoutError, LayoutGraph
from gvsvg.engine.runner import RenderOptions, RenderRunner


def load_layout(filepath: Path, is_json: bool = False, engine: str = "dot") -> LayoutGraph:
    """Read a layout from Graphviz JSON, or lay out a DOT file."""
    text = filepath.read_text(encoding="utf-8")
    if is_json:
        return LayoutGraph.from_json(text)
    return LayoutGraph.from_dot(text, engine=engine)


def export_layout(layout: LayoutGraph, output: str, device: str, options: RenderOptions) -> None:
    """Render a layout to *output* (a path, or ``-`` for stdout) using the named device."""
    features = get_device(device)
    target = sys.stdout.buffer if output == "-" else Path(output)
    with open_sink(target, compressed=features.compressed) as sink:
        RenderRunner(options=options).render(layout, sink)
    if sink.error is not None:
        raise OSError(f"Could not write {output}: {sink.error}")


def main(argv: List[str] = None) -> int:
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(
        prog="gvsvg",
        description="Render Graphviz layouts to SVG.",
        epilog="Example: gvsvg ./graph.dot -o ./build/graph.svg"
    )

    parser.add_argument(
        "input",
        type=Path,
        help="DOT file, or Graphviz JSON layout with --json"
    )

    parser.add_argument(
        "-o", "--output",
        type=str,
        help="Output file, '-' for stdout (default: input name with .svg/.svgz)"
    )

    parser.add_argument(
        "-T", "--format",
        choices=["svg", "svgz"],
        default="svg",
        help="Output format (default: svg)"
    )

    parser.add_argument(
        "-K", "--engine",
        default="dot",
        help="Graphviz layout engine (default: dot)"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Input is Graphviz JSON output (dot -Tjson) instead of DOT"
    )

    parser.add_argument(
        "--fontnames",
        choices=[mode.value for mode in FontNames],
        help="Font naming convention for text (default: graph attribute, else native)"
    )

    parser.add_argument(
        "-s", "--scale",
        type=float,
        default=1.0,
        help="Scale factor for the drawing (default: 1.0)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )

    # Validate input file
    if not args.input.exists():
        print(f"Error: File not found: {args.input}", file=sys.stderr)
        return 1

    if not args.input.is_file():
        print(f"Error: Not a file: {args.input}", file=sys.stderr)
        return 1

    if args.scale <= 0:
        print(f"Error: Scale must be positive: {args.scale}", file=sys.stderr)
        return 1

    try:
        layout = load_layout(args.input, is_json=args.json, engine=args.engine)
    except (LayoutError, RuntimeError, OSError) as e:
        print(f"Error loading file: {e}", file=sys.stderr)
        return 1

    output = args.output or str(args.input.with_suffix(f".{args.format}"))
    options = RenderOptions(
        scale=args.scale,
        fontnames=FontNames(args.fontnames) if args.fontnames else None,
    )

    try:
        export_layout(layout, output, args.format, options)
    except (ValueError, OSError) as e:
        print(f"Error exporting {args.input}: {e}", file=sys.stderr)
        return 1

    if output != "-":
        if args.verbose:
            print(f"Rendered '{layout.name}' -> {output}")
        else:
            print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
