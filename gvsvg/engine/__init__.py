"""Layout input and the driver that feeds it to a renderer."""

from .layout import LayoutCluster, LayoutEdge, LayoutError, LayoutGraph, LayoutObject, layout_json
from .runner import RenderOptions, RenderRunner, render_svg

__all__ = [
    "LayoutCluster",
    "LayoutEdge",
    "LayoutError",
    "LayoutGraph",
    "LayoutObject",
    "layout_json",
    "RenderOptions",
    "RenderRunner",
    "render_svg",
]
