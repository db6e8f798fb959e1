"""
gvsvg - An SVG 1.1 renderer for Graphviz layouts.

Main APIs:
- SvgRenderer: Turns drawing callbacks into SVG elements
- RenderRunner: Drives a renderer over a laid out graph
- LayoutGraph: Graphviz layout read from its JSON output

Output:
- render_svg: Render a layout to an SVG string
- open_sink: Write to a file or stream, optionally gzipped (svgz)
"""

__version__ = "0.1.0"

from gvsvg.core import Job, ObjState, ObjType, OutputSink, Point, TextPara, open_sink
from gvsvg.backend import RenderEngine, SvgRenderer, get_device
from gvsvg.engine import LayoutError, LayoutGraph, RenderOptions, RenderRunner, render_svg

__all__ = [
    "__version__",
    # Core
    "Job",
    "ObjState",
    "ObjType",
    "OutputSink",
    "Point",
    "TextPara",
    "open_sink",
    # Backends
    "RenderEngine",
    "SvgRenderer",
    "get_device",
    # Engine
    "LayoutError",
    "LayoutGraph",
    "RenderOptions",
    "RenderRunner",
    "render_svg",
]
