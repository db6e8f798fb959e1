"""Tests for the renderer and device feature descriptors."""

import pytest

from gvsvg.backend.features import (
    DEVICE_FEATURES_SVG,
    DEVICE_FEATURES_SVGZ,
    RENDER_FEATURES_SVG,
    RENDER_TYPES,
    ColorType,
    DeviceFeature,
    RenderFeature,
    get_device,
)
from gvsvg.backend.svg import SvgRenderer
from gvsvg.core.colors import SVG_KNOWN_COLORS


class TestRenderFeatures:

    def test_flags(self):
        flags = RENDER_FEATURES_SVG.flags
        for feature in RenderFeature:
            assert feature in flags

    def test_defaults(self):
        assert RENDER_FEATURES_SVG.default_pad == 4.0
        assert RENDER_FEATURES_SVG.color_type == ColorType.RGBA_BYTE
        assert RENDER_FEATURES_SVG.knowncolors is SVG_KNOWN_COLORS

    def test_svg_renderer_is_installed(self):
        renderer_class, features = RENDER_TYPES["svg"]
        assert renderer_class is SvgRenderer
        assert features is RENDER_FEATURES_SVG


class TestDeviceFeatures:

    def test_svg_device(self):
        assert DEVICE_FEATURES_SVG.flags == DeviceFeature.DOES_TRUECOLOR
        assert DEVICE_FEATURES_SVG.default_dpi == (72.0, 72.0)
        assert not DEVICE_FEATURES_SVG.compressed

    def test_svgz_device(self):
        assert DeviceFeature.BINARY_FORMAT in DEVICE_FEATURES_SVGZ.flags
        assert DeviceFeature.DOES_TRUECOLOR in DEVICE_FEATURES_SVGZ.flags
        assert DEVICE_FEATURES_SVGZ.compressed

    @pytest.mark.parametrize("name,expected", [
        ("svg", DEVICE_FEATURES_SVG),
        ("svg:svg", DEVICE_FEATURES_SVG),
        ("svgz", DEVICE_FEATURES_SVGZ),
        ("svgz:svg", DEVICE_FEATURES_SVGZ),
    ])
    def test_get_device(self, name, expected):
        assert get_device(name) is expected

    def test_unknown_device(self):
        with pytest.raises(ValueError, match="Unknown device: png"):
            get_device("png")
