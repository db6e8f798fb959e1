"""Renderer back-ends for gvsvg."""

from gvsvg.backend.base import RenderEngine
from gvsvg.backend.svg import SvgRenderer
from gvsvg.backend.features import (
    DEVICE_FEATURES_SVG,
    DEVICE_FEATURES_SVGZ,
    DEVICE_TYPES,
    RENDER_FEATURES_SVG,
    RENDER_TYPES,
    get_device,
)

__all__ = [
    "RenderEngine",
    "SvgRenderer",
    "DEVICE_FEATURES_SVG",
    "DEVICE_FEATURES_SVGZ",
    "DEVICE_TYPES",
    "RENDER_FEATURES_SVG",
    "RENDER_TYPES",
    "get_device",
]
