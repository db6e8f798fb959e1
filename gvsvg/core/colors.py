"""SVG paint values and the table of color names SVG understands."""

import logging
import re
from bisect import bisect_left
from typing import Tuple

from gvsvg.core.types import Color, RGBAColor, RenderError, StringColor


logger = logging.getLogger(__name__)


# Color keywords from http://www.w3.org/TR/SVG/types.html
# The tuple must stay sorted: membership is tested by binary search.
SVG_KNOWN_COLORS: Tuple[str, ...] = (
    "aliceblue", "antiquewhite", "aqua", "aquamarine", "azure",
    "beige", "bisque", "black", "blanchedalmond", "blue",
    "blueviolet", "brown", "burlywood",
    "cadetblue", "chartreuse", "chocolate", "coral",
    "cornflowerblue", "cornsilk", "crimson", "cyan",
    "darkblue", "darkcyan", "darkgoldenrod", "darkgray",
    "darkgreen", "darkgrey", "darkkhaki", "darkmagenta",
    "darkolivegreen", "darkorange", "darkorchid", "darkred",
    "darksalmon", "darkseagreen", "darkslateblue", "darkslategray",
    "darkslategrey", "darkturquoise", "darkviolet", "deeppink",
    "deepskyblue", "dimgray", "dimgrey", "dodgerblue",
    "firebrick", "floralwhite", "forestgreen", "fuchsia",
    "gainsboro", "ghostwhite", "gold", "goldenrod", "gray",
    "green", "greenyellow", "grey",
    "honeydew", "hotpink", "indianred",
    "indigo", "ivory", "khaki",
    "lavender", "lavenderblush", "lawngreen", "lemonchiffon",
    "lightblue", "lightcoral", "lightcyan", "lightgoldenrodyellow",
    "lightgray", "lightgreen", "lightgrey", "lightpink",
    "lightsalmon", "lightseagreen", "lightskyblue",
    "lightslategray", "lightslategrey", "lightsteelblue",
    "lightyellow", "lime", "limegreen", "linen",
    "magenta", "maroon", "mediumaquamarine", "mediumblue",
    "mediumorchid", "mediumpurple", "mediumseagreen",
    "mediumslateblue", "mediumspringgreen", "mediumturquoise",
    "mediumvioletred", "midnightblue", "mintcream",
    "mistyrose", "moccasin",
    "navajowhite", "navy", "oldlace",
    "olive", "olivedrab", "orange", "orangered", "orchid",
    "palegoldenrod", "palegreen", "paleturquoise",
    "palevioletred", "papayawhip", "peachpuff", "peru", "pink",
    "plum", "powderblue", "purple",
    "red", "rosybrown", "royalblue",
    "saddlebrown", "salmon", "sandybrown", "seagreen", "seashell",
    "sienna", "silver", "skyblue", "slateblue", "slategray",
    "slategrey", "snow", "springgreen", "steelblue",
    "tan", "teal", "thistle", "tomato", "turquoise",
    "violet",
    "wheat", "white", "whitesmoke",
    "yellow", "yellowgreen",
)

_HEX_COLOR = re.compile(r'^#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})?$')


def is_known_color(name: str) -> bool:
    """Return True if *name* is an SVG color keyword."""
    i = bisect_left(SVG_KNOWN_COLORS, name)
    return i < len(SVG_KNOWN_COLORS) and SVG_KNOWN_COLORS[i] == name


def format_color(color: Color) -> str:
    """Return the SVG paint value for a tagged color."""
    if isinstance(color, StringColor):
        return color.name
    if isinstance(color, RGBAColor):
        if color.a == 0:
            return "none"
        return "#%02x%02x%02x" % (color.r, color.g, color.b)
    raise RenderError(f"internal error: untagged color {color!r}")


def parse_color(value: str) -> Color:
    """
    Turn a color string from a layout into a tagged color.

    ``#rrggbb`` and ``#rrggbbaa`` become RGBA bytes. Anything else is kept
    as a name; names SVG does not know are passed through with a warning.
    """
    match = _HEX_COLOR.match(value)
    if match:
        r, g, b, a = match.groups()
        return RGBAColor(int(r, 16), int(g, 16), int(b, 16), int(a, 16) if a else 255)
    if value.lower() in ("none", "transparent"):
        return RGBAColor(0, 0, 0, 0)
    if not is_known_color(value.lower()):
        logger.warning("Unknown SVG color name %r, passing it through", value)
        return StringColor(value)
    return StringColor(value.lower())
