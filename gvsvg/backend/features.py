"""Capabilities the SVG renderer and its output devices advertise."""

from dataclasses import dataclass
from enum import Enum, Flag, auto
from typing import Dict, Tuple, Type

from gvsvg.backend.base import RenderEngine
from gvsvg.backend.svg import SvgRenderer
from gvsvg.core.colors import SVG_KNOWN_COLORS


class RenderFeature(Flag):
    Y_GOES_DOWN = auto()
    DOES_TRANSFORM = auto()
    DOES_LABELS = auto()
    DOES_MAPS = auto()
    DOES_TARGETS = auto()
    DOES_TOOLTIPS = auto()


class DeviceFeature(Flag):
    BINARY_FORMAT = auto()
    COMPRESSED_FORMAT = auto()
    DOES_TRUECOLOR = auto()


class ColorType(Enum):
    COLOR_STRING = "string"
    RGBA_BYTE = "rgba_byte"


@dataclass(frozen=True)
class RenderFeatures:
    flags: RenderFeature
    default_pad: float
    knowncolors: Tuple[str, ...]
    color_type: ColorType


@dataclass(frozen=True)
class DeviceFeatures:
    flags: DeviceFeature
    default_margin: Tuple[float, float] = (0.0, 0.0)
    default_pagesize: Tuple[float, float] = (0.0, 0.0)
    default_dpi: Tuple[float, float] = (72.0, 72.0)

    @property
    def compressed(self) -> bool:
        return bool(self.flags & DeviceFeature.COMPRESSED_FORMAT)


RENDER_FEATURES_SVG = RenderFeatures(
    flags=(
        RenderFeature.Y_GOES_DOWN
        | RenderFeature.DOES_TRANSFORM
        | RenderFeature.DOES_LABELS
        | RenderFeature.DOES_MAPS
        | RenderFeature.DOES_TARGETS
        | RenderFeature.DOES_TOOLTIPS
    ),
    default_pad=4.0,
    knowncolors=SVG_KNOWN_COLORS,
    color_type=ColorType.RGBA_BYTE,
)

DEVICE_FEATURES_SVG = DeviceFeatures(flags=DeviceFeature.DOES_TRUECOLOR)

DEVICE_FEATURES_SVGZ = DeviceFeatures(
    flags=DeviceFeature.BINARY_FORMAT | DeviceFeature.COMPRESSED_FORMAT | DeviceFeature.DOES_TRUECOLOR,
)

RENDER_TYPES: Dict[str, Tuple[Type[RenderEngine], RenderFeatures]] = {
    "svg": (SvgRenderer, RENDER_FEATURES_SVG),
}

DEVICE_TYPES: Dict[str, DeviceFeatures] = {
    "svg:svg": DEVICE_FEATURES_SVG,
    "svgz:svg": DEVICE_FEATURES_SVGZ,
}


def get_device(name: str) -> DeviceFeatures:
    """Look up a device by ``format`` or ``format:renderer`` name."""
    key = name if ":" in name else f"{name}:svg"
    try:
        return DEVICE_TYPES[key]
    except KeyError:
        raise ValueError(f"Unknown device: {name}. Use: {', '.join(sorted(DEVICE_TYPES))}") from None
