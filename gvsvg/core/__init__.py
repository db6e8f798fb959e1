"""Core data structures and helpers for gvsvg."""

from .types import (
    PENWIDTH_NORMAL,
    Box,
    Color,
    FontNames,
    GraphInfo,
    Job,
    ObjState,
    ObjType,
    PenType,
    Point,
    RenderError,
    RGBAColor,
    StringColor,
    TextPara,
    edge_name,
)
from .colors import SVG_KNOWN_COLORS, format_color, is_known_color, parse_color
from .escape import xml_comment_string, xml_string, xml_url_string
from .fonts import PostscriptAlias, lookup_postscript_alias
from .sink import OutputSink, open_sink

__all__ = [
    "PENWIDTH_NORMAL",
    "Box",
    "Color",
    "FontNames",
    "GraphInfo",
    "Job",
    "ObjState",
    "ObjType",
    "PenType",
    "Point",
    "RenderError",
    "RGBAColor",
    "StringColor",
    "TextPara",
    "edge_name",
    "SVG_KNOWN_COLORS",
    "format_color",
    "is_known_color",
    "parse_color",
    "xml_comment_string",
    "xml_string",
    "xml_url_string",
    "PostscriptAlias",
    "lookup_postscript_alias",
    "OutputSink",
    "open_sink",
]
